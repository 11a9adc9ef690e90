from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime knobs for a single env-cmd invocation."""

    rc_file_name: str = ".env-cmdrc"
    default_env_file: str = ".env"
    structured_extensions: Tuple[str, ...] = (".json", ".py")
    log_level: str = "WARNING"

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "Settings":
        log_level = environ.get("ENV_CMD_LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"ENV_CMD_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        rc_file_name = environ.get("ENV_CMD_RC_FILE") or cls.rc_file_name
        default_env_file = environ.get("ENV_CMD_DEFAULT_FILE") or cls.default_env_file
        return cls(
            rc_file_name=rc_file_name,
            default_env_file=default_env_file,
            log_level=log_level,
        )
