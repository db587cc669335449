# devcon/topics/setvar.py
#
# Built-in `set` command: the only mutator of the variable store.
#
#   set <name> <value>
#
# Value kind is inferred from the literal text:
#   all ASCII digits -> integer
#   true / false     -> bool
#   anything else    -> string (verbatim, no unescaping)

from __future__ import annotations

import logging

from devcon.model.schema import MAX_VAR_NAME, SET_COMMAND

log = logging.getLogger(__name__)


def cmd_set(console, argv):
    """set <name> <value>"""
    if len(argv) - 1 != 2:
        console.out(f"{SET_COMMAND}: wrong number of arguments")
        return

    name, text = argv[1], argv[2]
    if not name:
        console.out(f"{SET_COMMAND}: variable name must not be empty")
        return
    if len(name) > MAX_VAR_NAME:
        console.out(f"{SET_COMMAND}: variable name too long (max {MAX_VAR_NAME}): {name}")
        return

    # find + mutate must be one critical section (no duplicate creation)
    with console.lock:
        var = console.variables.set_or_create(name, text)
    log.debug("set %s (%s)", name, var.kind.value)


COMMANDS = {
    SET_COMMAND: cmd_set,
}
