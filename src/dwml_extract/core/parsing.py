"""
Lenient text-to-number parsing.

DWML products regularly contain nil or unit-suffixed values. Floats are read
from the longest numeric prefix of the text and fall back to NaN; integers
fall back to None.
"""

import math
import re
from typing import Optional

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"([+-]?)Infinity")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def parse_float(text: Optional[str]) -> float:
    """
    Parse the leading number of a string.

    Args:
        text: Raw text (may be None)

    Returns:
        Parsed value, or NaN if the text has no numeric prefix
    """
    if text is None:
        return math.nan

    stripped = text.strip()
    match = _FLOAT_PREFIX.match(stripped)
    if match:
        return float(match.group(0))

    match = _INFINITY_PREFIX.match(stripped)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    return math.nan


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a string.

    Args:
        text: Raw text (may be None)

    Returns:
        Parsed value, or None if the text has no integer prefix
    """
    if text is None:
        return None

    match = _INT_PREFIX.match(text.strip())
    return int(match.group(0)) if match else None


def finite_or_none(value: float) -> Optional[float]:
    """
    Map NaN and infinities to None for JSON output.

    Args:
        value: Parsed number

    Returns:
        The value, or None if it is not finite
    """
    return value if math.isfinite(value) else None
