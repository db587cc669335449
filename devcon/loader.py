# devcon/loader.py
#
# Bootstrap loader: feeds startup lines to Console.evaluate().
#
#   exec_lines(console, lines)   any iterable of text lines
#   exec_file(console, path)     local startup script (default: config.cfg)
#   exec_url(console, url)       startup script served over HTTP(S)
#
# Missing sources are reported on the console's output sink, not raised.
# Each non-blank line is echoed as "] <line>" before it runs.

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import httpx

if TYPE_CHECKING:
    from devcon.core import Console

log = logging.getLogger(__name__)

ECHO_PREFIX = "] "


def exec_lines(console: "Console", lines: Iterable[str], echo: bool = True) -> int:
    n = 0
    for raw in lines:
        line = raw.rstrip("\r\n").lstrip()
        if not line:
            continue
        if echo:
            console.out(ECHO_PREFIX + line)
        ok = console.evaluate(line)
        if not ok:
            log.info("startup line failed: %r", line)
        n += 1
    return n


def exec_file(console: "Console", path: str | Path, echo: bool = True) -> int:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            n = exec_lines(console, f, echo=echo)
    except OSError as e:
        log.warning("startup file %s not readable: %s", p, e)
        console.out(f"Couldn't open {p}")
        return 0
    log.debug("ran %d startup lines from %s", n, p)
    return n


def exec_url(console: "Console", url: str, echo: bool = True, timeout: float = 10.0) -> int:
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            r = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.warning("startup url %s failed: %s", url, e)
        console.out(f"Couldn't fetch {url}: {e}")
        return 0

    if r.status_code != 200:
        console.out(f"Couldn't fetch {url}: HTTP {r.status_code}")
        return 0

    n = exec_lines(console, r.text.split("\n"), echo=echo)
    log.debug("ran %d startup lines from %s", n, url)
    return n
