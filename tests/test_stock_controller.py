# tests/test_stock_controller.py
import pytest

from pos_frontend.api.stocks_repo import Stock
from pos_frontend.modules.stock.controller import StockController

from conftest import FakeStocksRepo


def stock_rows(n):
    return [
        Stock(id=i, item_id=i, name=f"Stock {i}", buy_price=10.0 * i, quantity=float(i))
        for i in range(1, n + 1)
    ]


@pytest.fixture()
def repo():
    return FakeStocksRepo(rows=stock_rows(45))


@pytest.fixture()
def ctrl(qtbot, repo, runner):
    c = StockController(repo, debounce_ms=0, runner=runner)
    qtbot.addWidget(c.get_widget())
    runner.deliver_all()
    yield c
    c.teardown()


def cell(c, row, col):
    return c.base.data(c.base.index(row, col))


def test_first_page_of_twenty(ctrl, repo):
    assert repo.fetch.calls == [(1, "")]
    assert ctrl.base.rowCount() == 20
    assert cell(ctrl, 0, 0) == "Stock 1"
    assert cell(ctrl, 0, 10) == "10.00"      # buying price
    assert cell(ctrl, 0, 11) == "-"          # retail price missing
    assert cell(ctrl, 0, 13) == "1"          # quantity
    assert ctrl.view.pagination.lbl.text() == "Page 1 of 3"
    assert ctrl.view.lbl_status.text() == "45 stock rows"


def test_paging(ctrl, runner):
    ctrl.view.pagination.btn_next.click()
    runner.deliver_all()
    ctrl.view.pagination.btn_next.click()
    runner.deliver_all()
    assert ctrl.base.rowCount() == 5
    assert cell(ctrl, 0, 0) == "Stock 41"
    assert not ctrl.view.pagination.btn_next.isEnabled()


def test_search_by_name(qtbot, ctrl, repo, runner):
    ctrl.view.search.setText("Stock 4")
    qtbot.waitUntil(lambda: repo.fetch.calls[-1] == (1, "Stock 4"), timeout=1000)
    runner.deliver_all()
    # Stock 4, Stock 40..45
    assert ctrl.base.rowCount() == 7


def test_no_rows(qtbot, runner):
    c = StockController(FakeStocksRepo(rows=[]), debounce_ms=0, runner=runner)
    qtbot.addWidget(c.get_widget())
    runner.deliver_all()
    assert c.view.lbl_status.text() == "No stocks found"
    c.teardown()


def test_fetch_error_keeps_rows_and_reports(ctrl, repo, runner):
    repo.fetch.error = RuntimeError("gateway timeout")
    ctrl.pager.refresh()
    runner.deliver_all()
    assert ctrl.base.rowCount() == 20
    assert ctrl.view.lbl_status.text() == "Could not load stocks: gateway timeout"
