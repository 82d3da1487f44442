from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .client import ApiClient
from .normalize import opt_float, opt_int, text, to_page


@dataclass(frozen=True)
class PersonSummary:
    first_name: str = ""
    last_name: str = ""
    username: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_api(cls, r) -> Optional["PersonSummary"]:
        if not isinstance(r, dict):
            return None
        return cls(
            first_name=text(r.get("first_name")),
            last_name=text(r.get("last_name")),
            username=text(r.get("username")),
        )


@dataclass(frozen=True)
class Invoice:
    """Historical invoice as listed by /pos/invoices (read-only here)."""
    id: int
    customer_id: Optional[int] = None
    created_user_id: Optional[int] = None
    previous_invoice_id: Optional[int] = None
    status: str = ""
    paid_amount: float = 0.0
    total_amount: float = 0.0
    discount_type: str = ""
    discount_amount: float = 0.0
    created_at: str = ""
    customer: Optional[PersonSummary] = None
    created_user: Optional[PersonSummary] = None

    @property
    def label(self) -> str:
        return f"INV{self.id}"

    @property
    def party_name(self) -> str:
        """Customer name, else the creator's name, else '-'."""
        for p in (self.customer, self.created_user):
            if p is not None and p.full_name:
                return p.full_name
        return "-"

    @classmethod
    def from_api(cls, r: dict) -> "Invoice":
        return cls(
            id=opt_int(r.get("id")) or 0,
            customer_id=opt_int(r.get("customer_id")),
            created_user_id=opt_int(r.get("created_user_id")),
            previous_invoice_id=opt_int(r.get("previous_invoice_id")),
            status=text(r.get("status")),
            paid_amount=opt_float(r.get("paid_amount")) or 0.0,
            total_amount=opt_float(r.get("total_amount")) or 0.0,
            discount_type=text(r.get("discount_type")),
            discount_amount=opt_float(r.get("discount_amount")) or 0.0,
            created_at=text(r.get("created_at")),
            customer=PersonSummary.from_api(r.get("customer")),
            created_user=PersonSummary.from_api(r.get("created_user")),
        )


@dataclass(frozen=True)
class RecalledInvoice:
    """What the recall dialog hands to the invoice composer."""
    id: int
    label: str
    customer_id: Optional[int]
    customer_name: str
    status: str
    total_amount: float
    paid_amount: float
    invoice: Invoice

    @classmethod
    def from_invoice(cls, inv: Invoice) -> "RecalledInvoice":
        return cls(
            id=inv.id,
            label=inv.label,
            customer_id=inv.customer_id,
            customer_name=inv.party_name,
            status=inv.status,
            total_amount=inv.total_amount,
            paid_amount=inv.paid_amount,
            invoice=inv,
        )


class InvoicesRepo:
    PATH = "/pos/invoices"

    def __init__(self, client: ApiClient):
        self.client = client

    def list_all(self) -> List[Invoice]:
        """The endpoint honours no query parameters; it always returns the full list."""
        payload = self.client.get(self.PATH)
        return to_page(payload, Invoice.from_api, source="invoices").items
