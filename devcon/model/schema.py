# devcon/model/schema.py
#
# Fixed limits and the variable kind tag.
#
# NOTE:
# Limits are part of the console's observable behaviour (tokenizer cap, line
# truncation, name validation). Keep them stable; tests pin them.

from enum import Enum

# -----------------------------
# Line evaluator limits
# -----------------------------

MAX_CMD_ARGS = 8         # tokens per line, command name included
MAX_LINE_LENGTH = 256    # characters considered per line; the rest is dropped
DELIMITER_MAX = " "      # any char <= this is a single-char delimiter

# -----------------------------
# Variable store limits
# -----------------------------

MAX_VAR_NAME = 31


class VarKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    BOOL = "bool"


# -----------------------------
# Config / bootstrap defaults
# -----------------------------

DEFAULT_CONFIG_PATH = "config/console.json"
DEFAULT_STARTUP_FILE = "config.cfg"
DEFAULT_HISTORY_SIZE = 100

SET_COMMAND = "set"
