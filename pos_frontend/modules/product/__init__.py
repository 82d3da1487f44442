# pos_frontend/modules/product/__init__.py

"""
Product module package exports.
"""

from .picker import ProductPickerDialog
from .model import ItemsTableModel, ProductLine

__all__ = ["ProductPickerDialog", "ItemsTableModel", "ProductLine"]
