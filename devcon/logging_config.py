"""Logging setup for devcon.

Diagnostics only: one stderr handler on the root logger, text or JSON lines.
What the user types and sees (printed variables, "no such command ...") goes
through the console's output sink, never through here.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# one JSON key per record attribute; threadName shows which caller hit the console
JSON_FIELDS = ("asctime", "levelname", "name", "threadName", "message")

# httpx logs every request at INFO; keep startup_url fetches quiet unless debugging
CHATTY_LOGGERS = ("httpx", "httpcore")


def _formatter(fmt: str) -> logging.Formatter:
    if fmt.lower() == "json":
        return JsonFormatter(" ".join(f"%({f})s" for f in JSON_FIELDS), datefmt=DATE_FORMAT)
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def _level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    log_level = _level(level)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(fmt))
    root.addHandler(handler)
    root.setLevel(log_level)

    quiet = log_level if log_level <= logging.DEBUG else max(log_level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    return handler
