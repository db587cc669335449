"""devcon/core.py

Console state + line evaluator + init_console() wiring.

One Console owns both registries and ONE re-entrant lock. evaluate() holds it
from the token-0 lookup through the handler call, so all console activity is
serialized. `set` takes the same lock again; that nesting is why it is an RLock.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any, Callable, Optional

from devcon.config import ConsoleConfig, load_config
from devcon.lib.commands import CommandRegistry
from devcon.lib.tokens import is_delimiter, tokenize
from devcon.lib.variables import VariableStore
from devcon.loader import exec_file, exec_url
from devcon.model.schema import DEFAULT_CONFIG_PATH, DEFAULT_HISTORY_SIZE, SET_COMMAND
from devcon.topics import ALL_COMMANDS

log = logging.getLogger(__name__)


class Console:
    def __init__(self, out: Callable[[str], Any] = print, history_size: int = DEFAULT_HISTORY_SIZE):
        self.out = out
        self.lock = threading.RLock()

        self.variables = VariableStore()
        self.commands = CommandRegistry()

        self.config: Optional[ConsoleConfig] = None

        # {"in": line, "ok": bool}, newest last
        self.log = deque(maxlen=history_size)

        for name, handler in ALL_COMMANDS.items():
            self.register_command(name, handler)

    # ---- registration ----
    def register_command(self, name, handler):
        if not name or any(is_delimiter(ch) for ch in name):
            raise ValueError(f"Invalid command name: {name!r}")
        if not callable(handler):
            raise ValueError(f"Handler for {name!r} is not callable")
        with self.lock:
            return self.commands.register(name, handler)

    # ---- embedding conveniences ----
    def get(self, name: str, default: Any = None) -> Any:
        with self.lock:
            return self.variables.get(name, default)

    def find_command(self, name: str):
        with self.lock:
            return self.commands.find(name)

    def find_variable(self, name: str):
        with self.lock:
            return self.variables.find(name)

    # ---- evaluation ----
    def evaluate(self, line: str) -> bool:
        """Run one console line. False only when token 0 names nothing."""
        argv = tokenize(line)
        with self.lock:
            ok = self._dispatch(argv)
            self.log.append({"in": line, "ok": ok})
            return ok

    def _dispatch(self, argv) -> bool:
        head = argv[0]
        extra = len(argv) - 1

        cmd = self.commands.find(head)
        if cmd is not None:
            self._invoke(cmd, argv)
            return True

        var = self.variables.find(head)
        if var is None:
            self.out(f"no such command or variable: {head}")
            return False

        if extra == 0:
            self.out(self.variables.format(var))
        elif extra == 1:
            setter = self.commands.find(SET_COMMAND)
            self._invoke(setter, [SET_COMMAND, head, argv[1]])
        else:
            self.out(f"{head}: wrong number of arguments")
        return True

    def _invoke(self, cmd, argv) -> None:
        try:
            cmd.handler(self, argv)
        except Exception as e:
            log.exception("command %r failed", cmd.name)
            self.out(f"Error: {e}")


def init_console(config_path=None, out: Callable[[str], Any] = print,
                 config: Optional[ConsoleConfig] = None) -> Console:
    cfg = config if config is not None else load_config(config_path or DEFAULT_CONFIG_PATH)
    console = Console(out=out, history_size=cfg.history_size)
    console.config = cfg

    if cfg.startup_url:
        exec_url(console, cfg.startup_url, echo=cfg.echo)
    elif cfg.startup:
        exec_file(console, cfg.startup, echo=cfg.echo)

    return console
