from __future__ import annotations

from pathlib import Path


class EnvCmdError(Exception):
    """Base class for errors raised by env-cmd itself."""


class UsageError(EnvCmdError):
    pass


class SourceNotFoundError(EnvCmdError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Error! Could not fallback to find or read file at {path}")
