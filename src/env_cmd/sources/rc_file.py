from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from env_cmd.sources.filesystem import FileSystem
from env_cmd.sources.structured import coerce_env

RuntimeConfig = Dict[str, object]


def load_rc_file(fs: FileSystem, path: Path) -> Optional[RuntimeConfig]:
    """Read the shared runtime-config file; None when it is absent or unreadable."""
    if not fs.exists(path):
        return None
    text = fs.read_text(path)
    if text is None:
        return None
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must hold a JSON object of environment sections")
    return payload


def select_section(config: RuntimeConfig, name: str, origin: str = "rc file") -> Optional[Dict[str, str]]:
    # only the requested section is validated, siblings may be in any state
    if name not in config:
        return None
    return coerce_env(config[name], origin=f"{origin} [{name}]")
