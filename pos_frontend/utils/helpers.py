# utils/helpers.py
from datetime import datetime
import logging
from typing import Union, Optional

NumberLike = Union[float, int, str]

_log = logging.getLogger(__name__)


def fmt_money(
    v: Optional[NumberLike],
    places: int = 2,
    *,
    sentinel: Optional[str] = None,
) -> str:
    """
    Format a number as money with thousands separators and a fixed number of decimals.

    Behavior on parse failure (including None):
      - returns `sentinel` when given (e.g. "-"),
      - otherwise returns str(v), or "" for None.
    """
    try:
        x = float(v)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        _log.debug("fmt_money: failed to parse %r as float: %s", v, e)
        if sentinel is not None:
            return str(sentinel)
        return "" if v is None else str(v)
    return f"{x:,.{places}f}"


def fmt_date(value: Optional[str]) -> str:
    """
    Date part of an ISO-8601 timestamp ('2025-01-05T10:11:12Z' -> '2025-01-05').
    Unparseable text is returned unchanged; None becomes "".
    """
    if not value:
        return ""
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return text
