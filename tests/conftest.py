# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - No network: HTTP is faked at the requests.Session level or above
# - Background work goes through ManualRunner so tests decide when (and
#   in which order) results come back
# - QSettings writes go to a temp INI file, never the user's profile
# - Silence benign Qt signal warnings
# ---------------------------------------------------------------------

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional
from unittest.mock import MagicMock

import pytest
from PySide6 import QtCore

from pos_frontend.api.customers_repo import Customer
from pos_frontend.api.invoices_repo import Invoice, PersonSummary
from pos_frontend.api.items_repo import Item
from pos_frontend.api.normalize import Page
from pos_frontend.api.stocks_repo import Stock
from pos_frontend.config import ClientSettings
from pos_frontend.core.tasks import TaskHandle

# headless unless the caller picked a platform
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# ---------- Qt: let pytest-qt own the app ----------
@pytest.fixture(scope="session")
def app(qapp):  # alias to match code that expects an `app` fixture
    return qapp


# ---------- Silence benign Qt warnings ----------
_BENIGN_QT_PATTERNS = [
    r"^QObject::connect: .* already connected",
    r"^QObject::disconnect: Unexpected null parameter",
    r"^QBasicTimer::stop: Failed\. Platform timer not running\.",
]

@pytest.fixture(autouse=True, scope="session")
def _silence_benign_qt():
    """Filter common harmless Qt messages during tests."""
    original = QtCore.qInstallMessageHandler(None)
    rx = [re.compile(p) for p in _BENIGN_QT_PATTERNS]

    def handler(msg_type, context, message):
        text = str(message)
        for r in rx:
            if r.search(text):
                return  # swallow benign messages
        QtCore.qInstallMessageHandler(None)
        try:
            QtCore.qDebug(message)
        finally:
            QtCore.qInstallMessageHandler(handler)

    QtCore.qInstallMessageHandler(handler)
    try:
        yield
    finally:
        QtCore.qInstallMessageHandler(original)


# ---------- Manual background runner ----------
@dataclass
class Job:
    handle: TaskHandle
    on_success: Callable[[Any], None]
    on_error: Optional[Callable[[BaseException], None]]
    result: Any = None
    error: Optional[BaseException] = None
    delivered: bool = False


class ManualRunner:
    """
    Runs `work` immediately at submit time but holds the callbacks until the
    test delivers them. Delivery ignores cancellation on purpose: a response
    may already be queued when the handle is cancelled, and the receivers'
    own sequence checks must cope with that.
    """

    def __init__(self):
        self.jobs: List[Job] = []

    def submit(self, work, on_success, on_error=None) -> TaskHandle:
        handle = TaskHandle()
        job = Job(handle, on_success, on_error)
        try:
            job.result = work()
        except Exception as e:
            job.error = e
        self.jobs.append(job)
        return handle

    def pending(self) -> List[Job]:
        return [j for j in self.jobs if not j.delivered]

    def deliver(self, job: Job) -> None:
        assert not job.delivered, "job delivered twice"
        job.delivered = True
        if job.error is None:
            job.on_success(job.result)
        elif job.on_error is not None:
            job.on_error(job.error)

    def deliver_all(self) -> None:
        """Deliver in submit order, including jobs submitted while delivering."""
        while self.pending():
            self.deliver(self.pending()[0])


@pytest.fixture()
def runner() -> ManualRunner:
    return ManualRunner()


# ---------- Client settings in a temp INI file ----------
@pytest.fixture()
def settings(tmp_path) -> ClientSettings:
    qs = QtCore.QSettings(str(tmp_path / "pos.ini"), QtCore.QSettings.IniFormat)
    return ClientSettings(qs)


# ---------- Sample data ----------
def make_customers(n: int) -> List[Customer]:
    return [
        Customer(id=i, first_name=f"First{i}", last_name=f"Last{i}", telephone=f"555-{i:04d}")
        for i in range(1, n + 1)
    ]


def make_items(n: int) -> List[Item]:
    return [Item(id=i, name=f"Item {i}", sku=f"SKU-{i:03d}") for i in range(1, n + 1)]


def make_invoice(inv_id: int, created_at: str = "1999-11-15T09:30:00",
                 customer: Optional[str] = None, creator: Optional[str] = None) -> Invoice:
    def person(full):
        if full is None:
            return None
        first, _, last = full.partition(" ")
        return PersonSummary(first_name=first, last_name=last)
    return Invoice(
        id=inv_id,
        created_at=created_at,
        customer=person(customer),
        created_user=person(creator),
    )


class ListFetcher:
    """(page, query) -> Page over an in-memory list; records every call."""

    def __init__(self, rows: list, key: Callable[[Any], str] = lambda r: str(r)):
        self.rows = list(rows)
        self.key = key
        self.calls: List[tuple] = []
        self.page_size = 10
        self.error: Optional[Exception] = None

    def __call__(self, page: int, query: str) -> Page:
        self.calls.append((page, query))
        if self.error is not None:
            raise self.error
        q = (query or "").lower()
        hits = [r for r in self.rows if q in self.key(r).lower()] if q else list(self.rows)
        start = (page - 1) * self.page_size
        return Page(hits[start:start + self.page_size], len(hits))


class FakeCustomersRepo:
    def __init__(self, rows: Optional[List[Customer]] = None):
        self.fetch = ListFetcher(rows if rows is not None else make_customers(3),
                                 key=lambda c: c.display_name)

    def fetcher(self, limit: int):
        self.fetch.page_size = limit
        return self.fetch


class FakeItemsRepo:
    def __init__(self, rows: Optional[List[Item]] = None):
        self.fetch = ListFetcher(rows if rows is not None else make_items(3),
                                 key=lambda i: f"{i.name} {i.sku}")

    def fetcher(self, limit: int):
        self.fetch.page_size = limit
        return self.fetch


class FakeStocksRepo:
    def __init__(self, by_outlet: Optional[dict] = None, rows: Optional[List[Stock]] = None):
        self.by_outlet = by_outlet or {}
        self.fetch = ListFetcher(rows or [], key=lambda s: s.name)
        self.outlet_calls: List[int] = []

    def list_by_outlet(self, outlet_id: int) -> List[Stock]:
        self.outlet_calls.append(outlet_id)
        value = self.by_outlet.get(outlet_id, [])
        if isinstance(value, Exception):
            raise value
        return list(value)

    def fetcher(self, take: int):
        self.fetch.page_size = take
        return self.fetch


class FakeInvoicesRepo:
    def __init__(self, rows: Optional[List[Invoice]] = None, error: Optional[Exception] = None):
        self.rows = list(rows or [])
        self.error = error
        self.calls = 0

    def list_all(self) -> List[Invoice]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.rows)


@pytest.fixture()
def http_session():
    """MagicMock standing in for requests.Session; set .get.return_value per test."""
    session = MagicMock()
    session.headers = {}
    return session


def json_response(payload, status: int = 200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp
