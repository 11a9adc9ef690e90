from __future__ import annotations

import json
import runpy
from pathlib import Path
from typing import Dict, Mapping

from env_cmd.utils.logger import get_logger

logger = get_logger(__name__)

MODULE_ATTRIBUTE = "ENV"


def load_structured_module(path: Path) -> Dict[str, str]:
    """Load a ready-made mapping from a ``.json`` document or a ``.py`` module.

    Errors from the underlying loader (missing file, bad JSON, broken module)
    are not wrapped.
    """
    if path.suffix == ".py":
        namespace = runpy.run_path(str(path))
        if MODULE_ATTRIBUTE not in namespace:
            raise ValueError(f"{path} does not define a module-level {MODULE_ATTRIBUTE} mapping")
        payload = namespace[MODULE_ATTRIBUTE]
    else:
        payload = json.loads(path.read_text(encoding="utf-8"))
    env = coerce_env(payload, origin=str(path))
    logger.debug("structured_module_loaded", path=str(path), keys=list(env))
    return env


def coerce_env(payload: object, origin: str) -> Dict[str, str]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"{origin} must hold a mapping of variable names to values")
    env: Dict[str, str] = {}
    for key, value in payload.items():
        env[str(key)] = _coerce_value(value, origin, key)
    return env


def _coerce_value(value: object, origin: str, key: object) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise ValueError(f"{origin}: value for {key!r} must be a string or scalar, got {type(value).__name__}")
