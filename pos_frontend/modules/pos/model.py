from __future__ import annotations

from PySide6.QtCore import QModelIndex

from ..product.model import ProductLine
from ..selection.model import EntityTableModel, dash


class LinesTableModel(EntityTableModel):
    """Product lines confirmed so far; display only, no totals."""

    HEADERS = ["#", "SKU", "Item Name", "Qty", "Unit Price"]

    def values(self, r: ProductLine, number: int) -> list:
        return [
            number,
            dash(r.sku),
            dash(r.name),
            r.qty,
            f"{r.unit_price:,.2f}",
        ]

    def append(self, line: ProductLine) -> None:
        n = len(self._rows)
        self.beginInsertRows(QModelIndex(), n, n)
        self._rows.append(line)
        self.endInsertRows()

    def clear(self) -> None:
        self.replace([])
