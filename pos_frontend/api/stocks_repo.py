from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .client import ApiClient
from .normalize import Page, opt_float, opt_int, text, to_page


@dataclass(frozen=True)
class Stock:
    """
    Outlet-specific pricing/quantity entry for a catalog item.

    Price columns keep None for "absent" so the price rule can tell a missing
    stock_price from a zero one.
    """
    id: int
    item_id: Optional[int]
    outlet_id: Optional[int] = None
    buy_price: Optional[float] = None
    stock_price: Optional[float] = None
    retail_price: Optional[float] = None
    quantity: Optional[float] = None
    # display columns from the stock listing
    name: str = ""
    other_name: str = ""
    type_name: str = ""
    category_name: str = ""
    sub_category_name: str = ""
    sku: str = ""
    description: str = ""
    rack: str = ""
    outlet_name: str = ""
    origin: str = ""
    unit: str = ""
    created_at: str = ""
    status: str = ""

    @classmethod
    def from_api(cls, r: dict) -> "Stock":
        return cls(
            id=opt_int(r.get("id")) or 0,
            item_id=opt_int(r.get("item_id")),
            outlet_id=opt_int(r.get("outlet_id")),
            buy_price=opt_float(r.get("buy_price")),
            stock_price=opt_float(r.get("stock_price")),
            retail_price=opt_float(r.get("retail_price")),
            quantity=opt_float(r.get("quantity")),
            name=text(r.get("name")),
            other_name=text(r.get("other_name")),
            type_name=text(r.get("type_name")),
            category_name=text(r.get("category_name")),
            sub_category_name=text(r.get("sub_category_name")),
            sku=text(r.get("sku")),
            description=text(r.get("description")),
            rack=text(r.get("rack")),
            outlet_name=text(r.get("outlet_name")),
            origin=text(r.get("origin")),
            unit=text(r.get("unit")),
            created_at=text(r.get("created_at")),
            status=text(r.get("status")),
        )


class StocksRepo:
    PATH = "/store/stocks"

    def __init__(self, client: ApiClient):
        self.client = client

    def search(self, page: int, query: str, take: int = 20) -> Page:
        """Paginated stock rows; the endpoint speaks take/skip/name."""
        params = {"take": take, "skip": (page - 1) * take, "name": (query or "").strip()}
        payload = self.client.get(self.PATH, params=params)
        return to_page(payload, Stock.from_api, source="stocks", page=page, limit=take)

    def fetcher(self, take: int):
        def fetch(page: int, query: str) -> Page:
            return self.search(page, query, take=take)
        return fetch

    def list_by_outlet(self, outlet_id: int) -> List[Stock]:
        """
        Every stock record of one outlet. There is no server-side item filter
        on this path, so callers scan the list themselves.
        """
        payload = self.client.get(f"{self.PATH}/outlet/{int(outlet_id)}")
        return to_page(payload, Stock.from_api, source="outlet stocks").items
