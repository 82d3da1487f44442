from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .client import ApiClient
from .normalize import Page, opt_int, text, to_page


@dataclass(frozen=True)
class Item:
    """A sellable catalog entry, independent of stock and price."""
    id: int
    name: str
    sku: str = ""
    other_name: str = ""
    description: str = ""
    origin: str = ""
    sub_category_id: Optional[int] = None
    created_at: str = ""

    @classmethod
    def from_api(cls, r: dict) -> "Item":
        return cls(
            id=opt_int(r.get("id")) or 0,
            name=text(r.get("name")),
            sku=text(r.get("sku")),
            other_name=text(r.get("other_name")),
            description=text(r.get("description")),
            origin=text(r.get("origin")),
            sub_category_id=opt_int(r.get("sub_category_id")),
            created_at=text(r.get("created_at")),
        )


class ItemsRepo:
    PATH = "/store/items"

    def __init__(self, client: ApiClient):
        self.client = client

    def search(self, page: int, query: str, limit: int = 10) -> Page:
        """Items matching `query` on name/SKU/description (server-side)."""
        params: dict = {"page": page, "limit": limit}
        q = (query or "").strip()
        if q:
            params["search"] = q
        payload = self.client.get(self.PATH, params=params)
        return to_page(payload, Item.from_api, source="items", page=page, limit=limit)

    def fetcher(self, limit: int):
        def fetch(page: int, query: str) -> Page:
            return self.search(page, query, limit=limit)
        return fetch
