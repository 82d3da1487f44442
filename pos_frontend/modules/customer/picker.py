from __future__ import annotations

from ...api.customers_repo import Customer, CustomersRepo, customer_label
from ...constants import CUSTOMERS_PAGE_SIZE, MODAL_SEARCH_DEBOUNCE_MS
from ...core.pager import SearchPager
from ..selection.dialog import SelectionDialog
from .model import CustomersTableModel


class CustomerPickerDialog(SelectionDialog):
    """
    Pick a customer for the invoice.

    Matching on name/address/telephone happens server-side; the dialog only
    debounces the query and pages through results. Emits a `Customer`.
    """

    def __init__(
        self,
        repo: CustomersRepo,
        parent=None,
        *,
        page_size: int = CUSTOMERS_PAGE_SIZE,
        debounce_ms: int = MODAL_SEARCH_DEBOUNCE_MS,
        runner=None,
    ):
        pager = SearchPager(
            repo.fetcher(page_size),
            page_size,
            debounce_ms=debounce_ms,
            runner=runner,
        )
        super().__init__(
            pager,
            CustomersTableModel(),
            title="Select Customer",
            placeholder="Search customer (name, address, phone)…",
            parent=parent,
        )
        pager.setParent(self)
        self._start()

    def _start(self) -> None:
        self.pager.refresh()

    def selection_label(self, entity: Customer) -> str:
        return customer_label(entity)

    def empty_text(self) -> str:
        return "No customers found"
