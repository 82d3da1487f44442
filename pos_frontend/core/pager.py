"""
core/pager.py

Search + pagination controllers shared by every lookup dialog.

SearchPager
    Server-side search. set_query() resets to page 1 in the same update and
    (re)starts one debounce timer; set_page() fetches at once. Every request
    carries a sequence number and only the newest one may touch state, so a
    slow response for an old query or page can never overwrite a newer one.

LocalPager
    Client-side search over a list fetched once (invoice recall). Filtering
    and pagination are recomputed synchronously on every change.

Both expose the same read model (items, page, total, total_pages, loading,
error, query), a `changed` signal after each update and `failed(str)` on
fetch errors.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from PySide6.QtCore import QObject, QTimer, Signal

from ..api.normalize import Page
from .tasks import TaskHandle, default_runner

_log = logging.getLogger(__name__)

FetchFn = Callable[[int, str], Page]


def total_pages_for(total: int, page_size: int) -> int:
    return max(1, math.ceil(max(total, 0) / max(page_size, 1)))


@dataclass(frozen=True)
class PagerState:
    query: str
    page: int
    page_size: int
    total: int
    total_pages: int
    items: tuple
    loading: bool
    error: Optional[str]


class _PagerBase(QObject):
    changed = Signal()
    failed = Signal(str)

    def __init__(self, page_size: int, runner=None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.page_size = max(int(page_size), 1)
        self._runner = runner or default_runner()
        self.query = ""
        self.page = 1
        self.total = 0
        self.items: List[Any] = []
        self.loading = False
        self.error: Optional[str] = None
        self._seq = 0
        self._task: Optional[TaskHandle] = None
        self._closed = False

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total, self.page_size)

    @property
    def closed(self) -> bool:
        return self._closed

    def first_row_number(self) -> int:
        """1-based running number of the first row on the current page."""
        return (self.page - 1) * self.page_size + 1

    def state(self) -> PagerState:
        return PagerState(
            query=self.query,
            page=self.page,
            page_size=self.page_size,
            total=self.total,
            total_pages=self.total_pages,
            items=tuple(self.items),
            loading=self.loading,
            error=self.error,
        )

    def close(self) -> None:
        """Drop whatever is in flight; nothing reaches this pager afterwards."""
        self._closed = True
        self._drop_in_flight()

    def _drop_in_flight(self) -> None:
        self._seq += 1
        if self._task is not None:
            self._task.cancel()
            self._task = None

    # ---- request sequencing ----

    def _issue(self, work: Callable[[], Any], on_result: Callable[[Any], None]) -> None:
        if self._closed:
            return
        if self._task is not None:
            self._task.cancel()
        self._seq += 1
        seq = self._seq
        self.loading = True
        self.error = None
        self.changed.emit()
        self._task = self._runner.submit(
            work,
            lambda result: self._accept(seq, on_result, result),
            lambda exc: self._reject(seq, exc),
        )

    def _is_current(self, seq: int) -> bool:
        if self._closed or seq != self._seq:
            _log.debug("%s: dropping stale response #%s (current #%s)",
                       type(self).__name__, seq, self._seq)
            return False
        return True

    def _accept(self, seq: int, on_result: Callable[[Any], None], result: Any) -> None:
        if not self._is_current(seq):
            return
        self._task = None
        on_result(result)

    def _reject(self, seq: int, exc: BaseException) -> None:
        if not self._is_current(seq):
            return
        self._task = None
        self.loading = False
        self.error = str(exc) or type(exc).__name__
        _log.warning("%s fetch failed: %s", type(self).__name__, self.error)
        self.changed.emit()
        self.failed.emit(self.error)


class SearchPager(_PagerBase):
    def __init__(
        self,
        fetch_fn: FetchFn,
        page_size: int,
        *,
        debounce_ms: int = 400,
        runner=None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(page_size, runner=runner, parent=parent)
        self._fetch_fn = fetch_fn
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(int(debounce_ms), 0))
        self._timer.timeout.connect(self._fetch)

    @property
    def debounce_pending(self) -> bool:
        return self._timer.isActive()

    def configure(self, page_size: int, fetch_fn: FetchFn) -> None:
        """Swap the page size and data source; the next fetch starts over at page 1."""
        if self._closed:
            return
        self._timer.stop()
        self._drop_in_flight()
        self.page_size = max(int(page_size), 1)
        self._fetch_fn = fetch_fn
        self.page = 1
        self.total = 0
        self.items = []
        self.loading = False
        self.error = None
        self.changed.emit()

    def set_query(self, query: str) -> None:
        """New query text: page back to 1 now, fetch once the typing settles."""
        if self._closed:
            return
        self._drop_in_flight()
        self.query = query or ""
        self.page = 1
        self._timer.start()
        self.changed.emit()

    def set_page(self, page: int) -> None:
        if self._closed:
            return
        self._timer.stop()
        self.page = min(max(int(page), 1), self.total_pages)
        self._fetch()

    def refresh(self) -> None:
        if self._closed:
            return
        self._timer.stop()
        self._fetch()

    def close(self) -> None:
        self._timer.stop()
        super().close()

    def _fetch(self) -> None:
        page, query = self.page, self.query
        fetch_fn = self._fetch_fn
        self._issue(lambda: fetch_fn(page, query), lambda result: self._apply(page, result))

    def _apply(self, page: int, result: Page) -> None:
        self.total = max(int(result.total), 0)
        last = self.total_pages
        if page > last:
            # result set shrank under us; fetch the last page that exists
            _log.debug("page %s is past the last page (%s); clamping", page, last)
            self.page = last
            self._fetch()
            return
        self.items = list(result.items)
        self.loading = False
        self.changed.emit()


class LocalPager(_PagerBase):
    def __init__(
        self,
        load_fn: Callable[[], Sequence[Any]],
        matches: Callable[[Any, str], bool],
        page_size: int,
        *,
        runner=None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(page_size, runner=runner, parent=parent)
        self._load_fn = load_fn
        self._matches = matches
        self._source: List[Any] = []
        self._filtered: List[Any] = []

    @property
    def source_count(self) -> int:
        return len(self._source)

    def load(self) -> None:
        """Fetch the full set once; the previous set stays if this fails."""
        load_fn = self._load_fn
        self._issue(lambda: list(load_fn()), self._apply_source)

    def set_query(self, query: str) -> None:
        if self._closed:
            return
        self.query = query or ""
        self.page = 1
        self._recompute()

    def set_page(self, page: int) -> None:
        if self._closed:
            return
        self.page = min(max(int(page), 1), self.total_pages)
        self._recompute()

    def _apply_source(self, rows: List[Any]) -> None:
        self._source = rows
        self.loading = False
        self._recompute()

    def _recompute(self) -> None:
        q = self.query.strip()
        self._filtered = [r for r in self._source if self._matches(r, q)] if q else list(self._source)
        self.total = len(self._filtered)
        self.page = min(self.page, self.total_pages)
        start = (self.page - 1) * self.page_size
        self.items = self._filtered[start:start + self.page_size]
        self.changed.emit()
