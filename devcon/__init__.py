"""In-process developer console: commands, typed variables, line evaluator."""

from devcon.core import Console, init_console
from devcon.lib.commands import Command, CommandHandler
from devcon.lib.variables import Variable, format_variable, infer_value
from devcon.loader import exec_file, exec_lines, exec_url
from devcon.model.schema import VarKind

__all__ = [
    "Console",
    "init_console",
    "Command",
    "CommandHandler",
    "Variable",
    "VarKind",
    "format_variable",
    "infer_value",
    "exec_file",
    "exec_lines",
    "exec_url",
]
__version__ = "0.1.0"
