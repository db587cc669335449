# devcon/config.py
#
# Console configuration (JSON). Lenient: a missing or
# malformed file yields defaults, a bad individual value falls back to that
# key's default.

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from devcon.model.schema import DEFAULT_HISTORY_SIZE, DEFAULT_STARTUP_FILE

log = logging.getLogger(__name__)

LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ConsoleConfig:
    startup: Optional[str] = DEFAULT_STARTUP_FILE
    startup_url: Optional[str] = None
    echo: bool = True
    history_size: int = DEFAULT_HISTORY_SIZE
    log_level: str = "WARNING"
    log_format: str = "text"


def _read_json(p: Path) -> Dict[str, Any]:
    if not p.exists():
        return {}
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return {}
    if not isinstance(raw, dict):
        log.warning("ignoring config %s: top level must be an object", p)
        return {}
    return raw


def _opt_str(raw, key, default):
    v = raw.get(key, default)
    if v is None or isinstance(v, str):
        return v
    log.warning("config %s: expected string, got %r", key, v)
    return default


def load_config(path: str | Path) -> ConsoleConfig:
    raw = _read_json(Path(path))
    d = ConsoleConfig()

    echo = raw.get("echo", d.echo)
    if not isinstance(echo, bool):
        log.warning("config echo: expected bool, got %r", echo)
        echo = d.echo

    try:
        history_size = int(raw.get("history_size", d.history_size))
    except (TypeError, ValueError):
        log.warning("config history_size: expected int, got %r", raw.get("history_size"))
        history_size = d.history_size
    if history_size < 0:
        history_size = 0

    log_format = str(raw.get("log_format", d.log_format)).lower()
    if log_format not in LOG_FORMATS:
        log.warning("config log_format: expected one of %s, got %r", LOG_FORMATS, log_format)
        log_format = d.log_format

    return ConsoleConfig(
        startup=_opt_str(raw, "startup", d.startup),
        startup_url=_opt_str(raw, "startup_url", d.startup_url),
        echo=echo,
        history_size=history_size,
        log_level=str(raw.get("log_level", d.log_level)).upper(),
        log_format=log_format,
    )
