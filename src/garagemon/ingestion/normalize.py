"""Normalization helpers.

Centralizes field cleaning and numeric parsing for text records.
"""

from __future__ import annotations

import math
import re

# Plain decimal or exponential notation; no underscores, hex, inf or nan.
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_EXPONENT_RE = re.compile(r"[eE]")
_NONZERO_DIGIT_RE = re.compile(r"[1-9]")


def clean_field(value: str | None) -> str:
    if value is None:
        return ""
    return value.strip()


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_value(text: str) -> float | None:
    """Parse a reading value, returning ``None`` when it is not a finite number.

    Out-of-range literals are rejected the same way as malformed text:
    ``1e999`` overflows to infinity and ``1e-400`` underflows to zero.
    """
    cleaned = clean_field(text)
    if not _FLOAT_RE.fullmatch(cleaned):
        return None
    result = float(cleaned)
    if not math.isfinite(result):
        return None
    if result == 0.0 and _NONZERO_DIGIT_RE.search(_EXPONENT_RE.split(cleaned, maxsplit=1)[0]):
        return None
    return result
