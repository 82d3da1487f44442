# pos_frontend/modules/customer/__init__.py

from .picker import CustomerPickerDialog
from .model import CustomersTableModel

__all__ = ["CustomerPickerDialog", "CustomersTableModel"]
