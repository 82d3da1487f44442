# pos_frontend/modules/stock/__init__.py

from .controller import StockController
from .view import StockView
from .model import StocksTableModel

__all__ = ["StockController", "StockView", "StocksTableModel"]
