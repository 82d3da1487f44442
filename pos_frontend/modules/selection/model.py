from __future__ import annotations

from typing import Any, List, Optional

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt


class EntityTableModel(QAbstractTableModel):
    """
    Base table model for one page of entities.

    Subclasses set HEADERS and implement `values(row_obj, number)`, returning
    one display value per header. `number` is the running row number across
    pages, so page 2 of a 10-per-page listing starts at 11.
    """

    HEADERS: List[str] = []

    def __init__(self, rows: Optional[list] = None):
        super().__init__()
        self._rows: list = list(rows or [])
        self._first_number = 1

    # --- Qt model basics ----------------------------------------------------

    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        if role in (Qt.DisplayRole, Qt.ToolTipRole):
            r = self._rows[index.row()]
            values = self.values(r, self._first_number + index.row())
            c = index.column()
            return values[c] if c < len(values) else None
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    # --- helpers ------------------------------------------------------------

    def values(self, row_obj: Any, number: int) -> list:
        raise NotImplementedError

    @staticmethod
    def key(row_obj: Any) -> Any:
        """Identity used to keep a selection across refreshes."""
        return getattr(row_obj, "id", None)

    def at(self, row: int) -> Any:
        return self._rows[row]

    def rows(self) -> list:
        return list(self._rows)

    def row_of(self, key: Any) -> int:
        for i, r in enumerate(self._rows):
            if self.key(r) == key:
                return i
        return -1

    def replace(self, rows: list, first_number: int = 1):
        self.beginResetModel()
        self._rows = list(rows)
        self._first_number = first_number
        self.endResetModel()


def dash(value: Any) -> str:
    """Blank-ish values render as '-'."""
    s = "" if value is None else str(value).strip()
    return s or "-"
