from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QFormLayout, QLabel, QLineEdit

from ...api.items_repo import Item, ItemsRepo
from ...constants import MODAL_SEARCH_DEBOUNCE_MS, PRODUCTS_PAGE_SIZE
from ...core.pager import SearchPager
from ...core.price_resolver import PriceQuote, PriceResolver
from ...core.tasks import TaskHandle, default_runner
from ...utils.validators import parse_float_or, parse_int_or
from ..selection.dialog import SelectionDialog
from .model import ItemsTableModel, ProductLine

_log = logging.getLogger(__name__)

NO_STOCK_TEXT = "No stock available for this item"


def _price_text(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


class ProductPickerDialog(SelectionDialog):
    """
    Pick a product, price it for the outlet, and add it to the invoice.

    Selecting a row looks the item up in the outlet's stock list and fills
    the wholesale/selling fields with the defaults; both stay editable. A
    lookup that is overtaken by another row selection is ignored. Quantity
    and price are free text, parsed leniently on Add (qty falls back to 1,
    price to 0), so a bad number never blocks the add.

    Emits a `ProductLine`.
    """

    def __init__(
        self,
        items: ItemsRepo,
        resolver: PriceResolver,
        outlet_id: int,
        parent=None,
        *,
        page_size: int = PRODUCTS_PAGE_SIZE,
        debounce_ms: int = MODAL_SEARCH_DEBOUNCE_MS,
        runner=None,
    ):
        self._runner = runner or default_runner()
        pager = SearchPager(
            items.fetcher(page_size),
            page_size,
            debounce_ms=debounce_ms,
            runner=self._runner,
        )
        super().__init__(
            pager,
            ItemsTableModel(),
            title="Select Product",
            placeholder="Search products (name, SKU, description)…",
            confirm_text="Add",
            parent=parent,
        )
        pager.setParent(self)
        self.resolver = resolver
        self.outlet_id = int(outlet_id)
        self._price_seq = 0
        self._price_task: Optional[TaskHandle] = None

        form = QFormLayout()
        self.txt_qty = QLineEdit("1")
        self.txt_qty.setPlaceholderText("Add quantity")
        self.txt_wholesale = QLineEdit()
        self.txt_wholesale.setPlaceholderText("Enter wholesale price")
        self.txt_selling = QLineEdit()
        self.txt_selling.setPlaceholderText("Enter selling price")
        form.addRow("Quantity", self.txt_qty)
        form.addRow("Wholesale Price", self.txt_wholesale)
        form.addRow("Selling Price", self.txt_selling)
        self.extras.addLayout(form)

        self.lbl_price_note = QLabel("")
        self.lbl_price_note.setStyleSheet("color:#a22;")
        self.extras.addWidget(self.lbl_price_note)

        self._start()

    def _start(self) -> None:
        self.pager.refresh()

    def selection_label(self, entity: Item) -> str:
        return entity.sku or entity.name or f"#{entity.id}"

    def empty_text(self) -> str:
        return "No items found"

    # ---- price lookup ----

    def _on_selection_changed(self, entity: Item) -> None:
        self._clear_prices()
        self.lbl_price_note.setText("Looking up price…")
        if self._price_task is not None:
            self._price_task.cancel()
        self._price_seq += 1
        seq = self._price_seq
        item_id, outlet_id, resolver = entity.id, self.outlet_id, self.resolver
        self._price_task = self._runner.submit(
            lambda: resolver.resolve(item_id, outlet_id),
            lambda quote: self._on_price(seq, quote),
            lambda exc: self._on_price_error(seq, exc),
        )

    def _price_is_current(self, seq: int) -> bool:
        return not self.is_finished and seq == self._price_seq

    def _on_price(self, seq: int, quote: Optional[PriceQuote]) -> None:
        if not self._price_is_current(seq):
            _log.debug("dropping stale price lookup #%s", seq)
            return
        self._price_task = None
        if quote is None:
            self._clear_prices()
            self.lbl_price_note.setText(NO_STOCK_TEXT)
            return
        self.txt_wholesale.setText(_price_text(quote.wholesale_price))
        self.txt_selling.setText(_price_text(quote.selling_price))
        self.lbl_price_note.setText("")

    def _on_price_error(self, seq: int, exc: BaseException) -> None:
        if not self._price_is_current(seq):
            return
        self._price_task = None
        _log.warning("price lookup failed: %s", exc)
        self._clear_prices()
        self.lbl_price_note.setText(f"Failed to load stock price: {exc}")

    def _clear_prices(self) -> None:
        self.txt_wholesale.clear()
        self.txt_selling.clear()

    def _on_shutdown(self) -> None:
        self._price_seq += 1
        if self._price_task is not None:
            self._price_task.cancel()
            self._price_task = None

    # ---- payload ----

    def selection_payload(self, entity: Item) -> ProductLine:
        return ProductLine(
            id=entity.id,
            sku=entity.sku,
            name=entity.name,
            description=entity.description,
            unit_price=parse_float_or(self.txt_selling.text(), 0.0),
            qty=parse_int_or(self.txt_qty.text(), 1),
        )
