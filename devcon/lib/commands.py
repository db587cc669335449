# devcon/lib/commands.py
#
# Command registry: append-only list of (name, handler) records.
# Duplicate names are kept; find() returns the first registered one.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from devcon.core import Console

log = logging.getLogger(__name__)


class CommandHandler(Protocol):
    def __call__(self, console: "Console", argv: List[str]) -> None:
        ...


@dataclass(frozen=True)
class Command:
    name: str
    handler: CommandHandler


class CommandRegistry:
    def __init__(self) -> None:
        self._cmds: List[Command] = []

    def find(self, name: str) -> Optional[Command]:
        for cmd in self._cmds:
            if cmd.name == name:
                return cmd
        return None

    def register(self, name: str, handler: CommandHandler) -> Command:
        if self.find(name) is not None:
            log.warning("command %r already registered; first registration wins", name)
        cmd = Command(name, handler)
        self._cmds.append(cmd)
        return cmd

    def names(self) -> List[str]:
        return [cmd.name for cmd in self._cmds]

    def __len__(self) -> int:
        return len(self._cmds)
