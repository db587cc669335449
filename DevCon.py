# DevCon.py
import readline  # noqa: F401  (line editing for input())
import sys

from devcon.config import load_config
from devcon.core import init_console
from devcon.logging_config import configure_logging
from devcon.model.schema import DEFAULT_CONFIG_PATH

PROMPT = "] "


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else DEFAULT_CONFIG_PATH

    # logging first, so config and startup-script records reach the handler
    cfg = load_config(config_path)
    configure_logging(cfg.log_level, cfg.log_format)
    console = init_console(config=cfg)

    print("devcon console (commands and variables; `set <name> <value>`)")
    print("Exit: quit/exit\n")

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in ("quit", "exit"):
            break
        console.evaluate(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
