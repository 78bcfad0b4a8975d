import logging
import os
from collections.abc import Callable

from dotenv import load_dotenv

from app.bootstrap import build_app
from data.config import ConfigError
from policy.dispatcher import dispatch
from policy.executor import CommandExecutor

PROMPT = "dzhnv>"


def run_repl(executor: CommandExecutor, read_line: Callable[[str], str] | None = None) -> int:
    read_line = read_line or input
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            # End of input counts as `exit`
            print()
            return 0
        command = dispatch(line)
        logging.debug(f"Dispatched {line!r} -> {command}")
        if executor.execute(command):
            return 0


def main() -> int:
    # load environment variables
    load_dotenv()

    level = getattr(logging, os.getenv("DEZHNEV_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        app = build_app()
    except ConfigError as e:
        logging.error(f"Error: {e}")
        return 1
    return run_repl(app.executor)


if __name__ == "__main__":
    raise SystemExit(main())
