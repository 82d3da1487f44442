"""
api/normalize.py

One adapter for every listing endpoint. The backend answers in a few shapes:

    [ {...}, {...} ]                              bare array
    { "data": [ ... ], "total": 42, ... }         envelope
    { "data": { "data": [ ... ], "total": 42 } }  envelope nested once

`to_page` folds all of them into `Page(items, total)`. Anything else is
treated as an empty result and logged; it never reaches the UI as an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page:
    items: List[Any] = field(default_factory=list)
    total: int = 0


# ---- field coercion used by the row constructors ----

def opt_int(v: Any) -> Optional[int]:
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def opt_float(v: Any) -> Optional[float]:
    """Decimal columns often arrive as strings ("100.00"); None/"" stay None."""
    if v is None or v == "":
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def text(v: Any) -> str:
    return "" if v is None else str(v)


def _unwrap(payload: Any) -> tuple[Optional[list], Optional[int]]:
    if isinstance(payload, list):
        return payload, None
    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, list):
            return data, opt_int(payload.get("total"))
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            total = opt_int(data.get("total"))
            if total is None:
                total = opt_int(payload.get("total"))
            return data["data"], total
    return None, None


def to_page(
    payload: Any,
    parse: Callable[[dict], T],
    *,
    source: str = "response",
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> Page:
    """
    Normalize a listing payload into a Page of parsed rows.

    Args:
        payload: decoded JSON (or None for an undecodable body).
        parse: row constructor, e.g. Customer.from_api.
        source: label used in diagnostics.
        page/limit: the page that was requested. When the server ignores
            paging and returns a bare array longer than `limit`, the requested
            slice is cut locally and `total` is the full array length.
    """
    rows, total = _unwrap(payload)
    if rows is None:
        _log.warning(
            "%s: unexpected payload shape (%s); treating as empty",
            source, type(payload).__name__,
        )
        return Page([], 0)

    items = []
    for r in rows:
        if not isinstance(r, dict):
            _log.debug("%s: skipping non-object row %r", source, r)
            continue
        items.append(parse(r))

    if total is None:
        total = len(items)
        if page and limit and len(items) > limit:
            start = (page - 1) * limit
            items = items[start:start + limit]

    return Page(items, max(total, 0))
