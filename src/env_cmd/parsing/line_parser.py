from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Union

from env_cmd.parsing.normalizer import split_lines

_KEY_RE = re.compile(r"(?!\d+$)[A-Za-z0-9_]+")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Matched:
    key: str
    value: str


@dataclass(frozen=True)
class Unmatched:
    line: str


LineMatch = Union[Matched, Unmatched]


def is_valid_key(key: str) -> bool:
    """Letters, digits and underscores only, and not purely numeric."""
    return bool(_KEY_RE.fullmatch(key))


def classify_line(line: str) -> LineMatch:
    """Try ``KEY=VALUE`` first, then ``KEY VALUE``."""
    stripped = line.strip()
    if "=" in stripped:
        key, value = stripped.split("=", 1)
        if is_valid_key(key.strip()):
            return Matched(key=key.strip(), value=value.strip())
    parts = _WHITESPACE_RE.split(stripped, maxsplit=1)
    if len(parts) == 2 and is_valid_key(parts[0]):
        return Matched(key=parts[0], value=parts[1].strip())
    return Unmatched(line=line)


def classify_lines(lines: Iterable[str]) -> List[LineMatch]:
    return [classify_line(line) for line in lines]


def parse_env_vars(text: str) -> Dict[str, str]:
    env: Dict[str, str] = {}
    for match in classify_lines(split_lines(text)):
        # malformed lines are dropped without a trace
        if isinstance(match, Matched):
            env[match.key] = match.value
    return env
