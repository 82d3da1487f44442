from __future__ import annotations

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .model import StocksTableModel
from .view import StockView
from ...api.stocks_repo import StocksRepo
from ...constants import STOCKS_PAGE_SIZE, STOCK_SEARCH_DEBOUNCE_MS
from ...core.pager import SearchPager


class StockController(BaseModule):
    """
    Read-only stock browser over /store/stocks.

    Name search is debounced and resets to page 1; paging fetches at once.
    Failures leave the last good page on screen with a message underneath.
    """

    def __init__(
        self,
        repo: StocksRepo,
        *,
        page_size: int = STOCKS_PAGE_SIZE,
        debounce_ms: int = STOCK_SEARCH_DEBOUNCE_MS,
        runner=None,
    ):
        super().__init__()
        self.repo = repo
        self.view = StockView()
        self.base = StocksTableModel()
        self.view.table.setModel(self.base)
        self.pager = SearchPager(
            repo.fetcher(page_size),
            page_size,
            debounce_ms=debounce_ms,
            runner=runner,
            parent=self,
        )
        self._wire()
        self.pager.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.view.search.textChanged.connect(self.pager.set_query)
        self.view.pagination.pageRequested.connect(self.pager.set_page)
        self.pager.changed.connect(self._render)

    def _render(self):
        p = self.pager
        self.base.replace(p.items, p.first_row_number())
        self.view.table.resizeColumnsToContents()
        self.view.pagination.set_state(p.page, p.total_pages)
        if p.error:
            self.view.lbl_status.setText(f"Could not load stocks: {p.error}")
        elif p.loading:
            self.view.lbl_status.setText("Loading stocks…")
        elif not p.items:
            self.view.lbl_status.setText("No stocks found")
        else:
            self.view.lbl_status.setText(f"{p.total} stock rows")

    def teardown(self):
        self.pager.close()
