from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..api.stocks_repo import Stock, StocksRepo

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceQuote:
    """Default prices for an invoice line. The operator may still edit both."""
    wholesale_price: float
    selling_price: float


def quote_from_stock(stock: Stock) -> PriceQuote:
    """
    wholesale = buy_price, else 0
    selling   = stock_price (outlet override), else retail_price (catalog default), else 0
    """
    wholesale = stock.buy_price if stock.buy_price is not None else 0.0
    if stock.stock_price is not None:
        selling = stock.stock_price
    elif stock.retail_price is not None:
        selling = stock.retail_price
    else:
        selling = 0.0
    return PriceQuote(wholesale_price=float(wholesale), selling_price=float(selling))


def find_stock(stocks: Iterable[Stock], item_id: int) -> Optional[Stock]:
    return next((s for s in stocks if s.item_id == item_id), None)


class PriceResolver:
    def __init__(self, stocks: StocksRepo):
        self.stocks = stocks

    def resolve(self, item_id: int, outlet_id: int) -> Optional[PriceQuote]:
        """
        Price an item at an outlet from the outlet's stock list.

        Returns None when the outlet has no stock record for the item; that
        is an expected state, not an error. Transport errors propagate.
        """
        stock = find_stock(self.stocks.list_by_outlet(outlet_id), item_id)
        if stock is None:
            _log.info("no stock for item %s at outlet %s", item_id, outlet_id)
            return None
        return quote_from_stock(stock)
