# pos_frontend/modules/invoice/__init__.py

from .recall import InvoiceRecallDialog
from .model import InvoicesTableModel, invoice_matches

__all__ = ["InvoiceRecallDialog", "InvoicesTableModel", "invoice_matches"]
