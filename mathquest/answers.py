"""
Math Quest - Answer Checking
Numeric coercion of submitted answers and exact comparison with the stored answer
"""

import math
import re
from typing import Any, Optional

# Decimal literal with optional exponent, or a signed Infinity
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def _int_or_float(value) -> float:
    """Integers too large for a float count as Infinity with their sign"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def coerce_answer(value: Any) -> float:
    """Turn whatever the page posted into a number.

    Booleans count as 1/0, numbers pass through, strings are trimmed and
    parsed (an empty string is 0). Anything that cannot be read as a number,
    including a missing answer, becomes NaN so it never equals a real answer.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return _int_or_float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.match(text):
        return float(text)
    infinity = _INFINITY_RE.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _PREFIXED_RE.match(text):
        return _int_or_float(int(text, 0))
    return math.nan


def is_correct_answer(user_answer: Any, final_answer: Any) -> bool:
    """Exact numeric equality; NaN on either side is never correct"""
    return coerce_answer(user_answer) == coerce_answer(final_answer)


def storable_answer(value: float) -> Optional[float]:
    """JSON has no NaN or Infinity, so those are stored as null"""
    return value if math.isfinite(value) else None


def format_number(value: float) -> str:
    """Render a number the way a student would write it (5 rather than 5.0)"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
