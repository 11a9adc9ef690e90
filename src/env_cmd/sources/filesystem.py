from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from env_cmd.utils.logger import get_logger

logger = get_logger(__name__)


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> Optional[str]:
        """Return the file contents, or None when the file is missing or unreadable."""
        ...


class LocalFileSystem:
    """Reads from the real disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("file_read_failed", path=str(path), error=str(exc))
            return None
