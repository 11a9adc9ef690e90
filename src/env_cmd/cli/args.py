from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence, Tuple

from env_cmd.errors import UsageError

HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True)
class ParsedArguments:
    env_source: str
    command: str
    command_args: Tuple[str, ...] = ()


def parse_args(argv: Sequence[str]) -> ParsedArguments:
    """Split ``argv`` into the env source, the command and its arguments.

    Everything after the command is passed through untouched, option-looking
    tokens included, so the usual argparse machinery is not used here.
    """
    if len(argv) < 2:
        raise UsageError("Error! Too few arguments passed to env-cmd.")
    env_source, command, *command_args = argv
    if not env_source or not command:
        raise UsageError("Error! Empty env source or command passed to env-cmd.")
    return ParsedArguments(env_source=env_source, command=command, command_args=tuple(command_args))


class _HelpFormatter(argparse.RawDescriptionHelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        return super().add_usage(usage, actions, groups, prefix or "Usage: ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="env-cmd",
        formatter_class=_HelpFormatter,
        usage="env-cmd [env_file | env_name] command [command options]",
        description="A simple utility for running a cli application using an env config file.",
        epilog=(
            "Also supports using a .env-cmdrc json file in the execution directory to support "
            "multiple environment configs in one file. Files ending in .json or .py are loaded "
            "as structured modules; a .py module must define a module-level ENV mapping."
        ),
    )
    parser.add_argument("env_file", metavar="env_file | env_name", help="Env file path or .env-cmdrc section name.")
    parser.add_argument("command", help="Command to run with the loaded environment.")
    parser.add_argument("command_args", nargs=argparse.REMAINDER, help="Arguments passed to the command.")
    return parser


def format_help() -> str:
    return build_parser().format_help()
