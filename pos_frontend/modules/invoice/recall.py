from __future__ import annotations

from ...api.invoices_repo import Invoice, InvoicesRepo, RecalledInvoice
from ...constants import INVOICES_PAGE_SIZE
from ...core.pager import LocalPager
from ..selection.dialog import SelectionDialog
from .model import InvoicesTableModel, invoice_matches


class InvoiceRecallDialog(SelectionDialog):
    """
    Recall a previous invoice.

    The invoices endpoint takes no search or paging parameters, so the full
    list is fetched once when the dialog opens and everything else (filter,
    pagination) happens locally, recomputed on every keystroke.

    Emits a `RecalledInvoice`.
    """

    def __init__(
        self,
        repo: InvoicesRepo,
        parent=None,
        *,
        page_size: int = INVOICES_PAGE_SIZE,
        runner=None,
    ):
        pager = LocalPager(repo.list_all, invoice_matches, page_size, runner=runner)
        super().__init__(
            pager,
            InvoicesTableModel(),
            title="Recall Invoice",
            placeholder="Search invoice (number, date, customer, cashier)…",
            confirm_text="Recall Invoice",
            parent=parent,
        )
        pager.setParent(self)
        self._start()

    def _start(self) -> None:
        self.pager.load()

    def selection_label(self, entity: Invoice) -> str:
        return entity.label

    def selection_payload(self, entity: Invoice) -> RecalledInvoice:
        return RecalledInvoice.from_invoice(entity)

    def empty_text(self) -> str:
        if self.pager.source_count == 0:
            return "No invoices found"
        return "No results for your search"
