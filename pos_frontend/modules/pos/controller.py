from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from ..customer.picker import CustomerPickerDialog
from ..invoice.recall import InvoiceRecallDialog
from ..product.model import ProductLine
from ..product.picker import ProductPickerDialog
from ..selection.dialog import SelectionDialog
from .model import LinesTableModel
from .view import PosView
from ...api.customers_repo import Customer, CustomersRepo, customer_label
from ...api.invoices_repo import InvoicesRepo, RecalledInvoice
from ...api.items_repo import ItemsRepo
from ...api.stocks_repo import StocksRepo
from ...config import ClientSettings
from ...core.price_resolver import PriceResolver

_log = logging.getLogger(__name__)


class PosController(BaseModule):
    """
    Hosts the three selection dialogs and keeps what they hand back.

    One dialog is open at a time. The outlet id is read from the persisted
    client settings each time the product dialog opens.
    """

    def __init__(
        self,
        customers: CustomersRepo,
        items: ItemsRepo,
        stocks: StocksRepo,
        invoices: InvoicesRepo,
        *,
        settings: Optional[ClientSettings] = None,
        runner=None,
    ):
        super().__init__()
        self.customers = customers
        self.items = items
        self.invoices = invoices
        self.resolver = PriceResolver(stocks)
        self.settings = settings or ClientSettings()
        self.runner = runner

        self.customer: Optional[Customer] = None
        self.recalled: Optional[RecalledInvoice] = None
        self.active_dialog: Optional[SelectionDialog] = None

        self.view = PosView()
        self.lines = LinesTableModel()
        self.view.lines.setModel(self.lines)
        self._wire()
        self._render_header()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.view.btn_customer.clicked.connect(self.open_customer_picker)
        self.view.btn_product.clicked.connect(self.open_product_picker)
        self.view.btn_recall.clicked.connect(self.open_invoice_recall)
        self.view.btn_clear.clicked.connect(self.clear)

    # ---- dialogs ----

    def open_customer_picker(self) -> CustomerPickerDialog:
        dlg = CustomerPickerDialog(self.customers, self.view, runner=self.runner)
        dlg.selected.connect(self._on_customer)
        return self._show(dlg)

    def open_product_picker(self) -> ProductPickerDialog:
        outlet_id = self.settings.outlet_id()
        dlg = ProductPickerDialog(
            self.items, self.resolver, outlet_id, self.view, runner=self.runner
        )
        dlg.selected.connect(self._on_product)
        return self._show(dlg)

    def open_invoice_recall(self) -> InvoiceRecallDialog:
        dlg = InvoiceRecallDialog(self.invoices, self.view, runner=self.runner)
        dlg.selected.connect(self._on_recalled)
        return self._show(dlg)

    def _show(self, dlg: SelectionDialog) -> SelectionDialog:
        if self.active_dialog is not None and not self.active_dialog.is_finished:
            self.active_dialog.reject()
        self.active_dialog = dlg
        dlg.closed.connect(lambda: self._on_dialog_closed(dlg))
        dlg.show()
        return dlg

    def _on_dialog_closed(self, dlg: SelectionDialog):
        if self.active_dialog is dlg:
            self.active_dialog = None
        dlg.deleteLater()

    # ---- results ----

    def _on_customer(self, customer: Customer):
        self.customer = customer
        self._render_header()

    def _on_product(self, line: ProductLine):
        _log.debug("line added: item %s x%s @ %s", line.id, line.qty, line.unit_price)
        self.lines.append(line)

    def _on_recalled(self, invoice: RecalledInvoice):
        self.recalled = invoice
        self._render_header()

    def product_lines(self) -> List[ProductLine]:
        return self.lines.rows()

    def clear(self):
        self.customer = None
        self.recalled = None
        self.lines.clear()
        self._render_header()

    def _render_header(self):
        self.view.lbl_outlet.setText(str(self.settings.outlet_id()))
        self.view.lbl_customer.setText(customer_label(self.customer) if self.customer else "-")
        self.view.lbl_invoice.setText(self.recalled.label if self.recalled else "-")

    def teardown(self):
        if self.active_dialog is not None and not self.active_dialog.is_finished:
            self.active_dialog.reject()
