from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .client import ApiClient
from .normalize import Page, opt_int, text, to_page


@dataclass(frozen=True)
class Customer:
    id: int
    first_name: str
    last_name: str
    address: str = ""
    telephone: str = ""
    description: str = ""
    created_at: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_api(cls, r: dict) -> "Customer":
        return cls(
            id=opt_int(r.get("id")) or 0,
            first_name=text(r.get("first_name")),
            last_name=text(r.get("last_name")),
            address=text(r.get("address")),
            telephone=text(r.get("telephone")),
            description=text(r.get("description")),
            created_at=text(r.get("created_at")),
        )


class CustomersRepo:
    """Read side of the customer endpoints (create/update live elsewhere)."""

    PATH = "/pos/customers"

    def __init__(self, client: ApiClient):
        self.client = client

    def search(self, page: int, query: str, limit: int = 10) -> Page:
        """
        One page of customers. Matching on name/address/telephone is done
        server-side; an empty query lists everyone.
        """
        params: dict = {"page": page, "limit": limit}
        q = (query or "").strip()
        if q:
            params["search"] = q
        payload = self.client.get(self.PATH, params=params)
        return to_page(payload, Customer.from_api, source="customers", page=page, limit=limit)

    def fetcher(self, limit: int):
        """Adapt `search` to the (page, query) -> Page shape pagers expect."""
        def fetch(page: int, query: str) -> Page:
            return self.search(page, query, limit=limit)
        return fetch


def customer_label(c: Optional[Customer]) -> str:
    if c is None:
        return "None"
    return c.display_name or f"Customer #{c.id}"
