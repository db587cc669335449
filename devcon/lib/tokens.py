# devcon/lib/tokens.py
# Store-free tokenizer primitive (no Console dependency).

from __future__ import annotations

from typing import List

from devcon.model.schema import DELIMITER_MAX, MAX_CMD_ARGS, MAX_LINE_LENGTH


def is_delimiter(ch: str) -> bool:
    return ch <= DELIMITER_MAX


def tokenize(line: str) -> List[str]:
    """Split one console line into at most MAX_CMD_ARGS tokens.

    Every control or space character is a one-character delimiter and runs are
    NOT collapsed: ``"set  x 5"`` -> ``["set", "", "x", "5"]``. Token 0 always
    exists, so the empty line gives ``[""]``. Once the cap is reached the last
    token ends at the next delimiter and the remainder is dropped.
    """
    line = line[:MAX_LINE_LENGTH]
    tokens: List[str] = []
    start = 0
    for i, ch in enumerate(line):
        if not is_delimiter(ch):
            continue
        tokens.append(line[start:i])
        if len(tokens) == MAX_CMD_ARGS:
            return tokens
        start = i + 1
    tokens.append(line[start:])
    return tokens
