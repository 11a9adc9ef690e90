from __future__ import annotations

from typing import List


def strip_comments(text: str) -> str:
    """Drop full-line and trailing ``#`` comments, keeping the line layout intact.

    A ``#`` inside a closed pair of double quotes is part of the value.
    """
    return "\n".join(_strip_line_comment(line) for line in text.split("\n"))


def strip_empty_lines(text: str) -> str:
    lines = [line for line in split_lines(text) if line.strip()]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def normalize(text: str) -> str:
    return strip_empty_lines(strip_comments(text))


def _strip_line_comment(line: str) -> str:
    if line.lstrip().startswith("#"):
        return ""
    kept: List[str] = []
    idx = 0
    while idx < len(line):
        char = line[idx]
        if char == '"':
            closing = line.find('"', idx + 1)
            if closing != -1:
                kept.append(line[idx : closing + 1])
                idx = closing + 1
                continue
        elif char == "#":
            return "".join(kept).rstrip()
        kept.append(char)
        idx += 1
    return line
