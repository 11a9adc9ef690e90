from __future__ import annotations

from typing import Dict

from env_cmd.parsing.line_parser import parse_env_vars
from env_cmd.parsing.normalizer import normalize
from env_cmd.parsing.quotes import strip_double_quotes


def parse_env_string(text: str) -> Dict[str, str]:
    """Turn raw env-file text into a flat mapping (normalize, parse, unwrap quotes)."""
    return strip_double_quotes(parse_env_vars(normalize(text)))
