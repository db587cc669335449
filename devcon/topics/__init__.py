# devcon/topics/__init__.py
# Built-in command surface. Each topic exports COMMANDS: name -> handler.

from devcon.topics.setvar import COMMANDS as SETVAR_COMMANDS

ALL_COMMANDS = {}
ALL_COMMANDS.update(SETVAR_COMMANDS)
