# pos_frontend/api/__init__.py
"""
REST access layer.

Usage:
    from pos_frontend.api import ApiClient, CustomersRepo
    customers = CustomersRepo(ApiClient())
    page = customers.search(1, "ali")
"""

from .client import ApiClient, NetworkFailure
from .normalize import Page, to_page
from .customers_repo import Customer, CustomersRepo
from .items_repo import Item, ItemsRepo
from .stocks_repo import Stock, StocksRepo
from .invoices_repo import Invoice, InvoicesRepo, RecalledInvoice

__all__ = [
    "ApiClient", "NetworkFailure", "Page", "to_page",
    "Customer", "CustomersRepo",
    "Item", "ItemsRepo",
    "Stock", "StocksRepo",
    "Invoice", "InvoicesRepo", "RecalledInvoice",
]
