from __future__ import annotations

from ...api.invoices_repo import Invoice
from ...utils.helpers import fmt_date
from ...utils.validators import non_empty
from ..selection.model import EntityTableModel, dash


def invoice_matches(inv: Invoice, query: str) -> bool:
    """
    Case-insensitive substring match over invoice id, created_at text,
    customer first/last name and creator first/last name.
    """
    if not non_empty(query):
        return True
    q = query.strip().lower()
    fields = [str(inv.id), inv.created_at]
    for person in (inv.customer, inv.created_user):
        if person is not None:
            fields.extend([person.first_name, person.last_name])
    return any(q in (f or "").lower() for f in fields)


class InvoicesTableModel(EntityTableModel):
    HEADERS = ["#", "Date", "Invoice", "Created By", "Customer"]

    def values(self, r: Invoice, number: int) -> list:
        return [
            number,
            fmt_date(r.created_at),
            r.label,
            dash(r.created_user_id),
            r.party_name,
        ]
