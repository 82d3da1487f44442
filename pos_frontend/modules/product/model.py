from __future__ import annotations

from dataclasses import dataclass

from ...api.items_repo import Item
from ..selection.model import EntityTableModel, dash


@dataclass(frozen=True)
class ProductLine:
    """A priced, identified line candidate handed to the invoice composer."""
    id: int
    sku: str
    name: str
    description: str
    unit_price: float
    qty: int


class ItemsTableModel(EntityTableModel):
    HEADERS = ["#", "SKU", "Description", "Item Name", "Origin"]

    def values(self, r: Item, number: int) -> list:
        return [
            number,
            dash(r.sku),
            dash(r.description),
            dash(r.name),
            dash(r.origin),
        ]
