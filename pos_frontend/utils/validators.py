# utils/validators.py
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Lenient numeric parsing for free-text inputs ----
#
# Quantity and price fields are plain text boxes. Operators type anything,
# and a bad number must never raise or block adding a line, so these parse
# the leading number and fall back to `default` otherwise.

def parse_int_or(x, default: int) -> int:
    """
    Leading-integer parse ("12abc" -> 12, "3.7" -> 3).

    Returns `default` when nothing parses or the parsed value is 0.
    """
    m = _LEADING_INT.match(str(x)) if x is not None else None
    if not m:
        return default
    value = int(m.group(1))
    return value or default


def parse_float_or(x, default: float) -> float:
    """
    Leading-decimal parse ("12.5kg" -> 12.5, ".5" -> 0.5).

    Returns `default` when nothing parses or the parsed value is 0.
    """
    m = _LEADING_FLOAT.match(str(x)) if x is not None else None
    if not m:
        return default
    try:
        value = float(m.group(1))
    except ValueError:
        return default
    return value or default
