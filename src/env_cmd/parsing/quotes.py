from __future__ import annotations

from typing import Dict, Mapping


def unwrap_quotes(value: str) -> str:
    """Remove one enclosing pair of double quotes, leaving inner quotes alone."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def strip_double_quotes(env: Mapping[str, str]) -> Dict[str, str]:
    return {key: unwrap_quotes(value) for key, value in env.items()}
