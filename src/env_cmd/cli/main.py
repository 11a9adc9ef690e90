from __future__ import annotations

import os
import sys
from typing import Sequence

from env_cmd.cli.args import HELP_FLAGS, format_help
from env_cmd.config import Settings
from env_cmd.runner.dispatch import env_cmd
from env_cmd.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

USAGE_MARKER = "passed"


def print_help() -> str:
    help_text = format_help()
    print(help_text)
    return help_text


def handle_uncaught_exception(exc: BaseException) -> int:
    """Report a fatal error; usage problems get the help text first."""
    message = str(exc) or type(exc).__name__
    if USAGE_MARKER in message:
        print_help()
    print(message, file=sys.stderr)
    logger.error("env_cmd_failed", error_type=type(exc).__name__)
    return 1


def run(argv: Sequence[str]) -> int:
    if argv and argv[0] in HELP_FLAGS:
        print_help()
        return 0
    try:
        return env_cmd(argv)
    except Exception as exc:
        return handle_uncaught_exception(exc)


def main() -> None:
    configure_logging()
    try:
        settings = Settings.from_environ(os.environ)
    except ValueError as exc:
        sys.exit(handle_uncaught_exception(exc))
    configure_logging(settings.log_level)
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
