from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from ...widgets.pagination import PaginationBar
from ...widgets.table_view import TableView


class StockView(QWidget):
    """
    Stock browser:
      - search box (item name)
      - stock table (one page)
      - status line + pagination bar
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        bar = QHBoxLayout()
        bar.addWidget(QLabel("Search:"))
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search items by name…")
        self.search.setClearButtonEnabled(True)
        bar.addWidget(self.search, 1)
        root.addLayout(bar)

        self.table = TableView()
        root.addWidget(self.table, 1)

        self.lbl_status = QLabel("")
        self.lbl_status.setStyleSheet("color:#666;")
        root.addWidget(self.lbl_status)

        self.pagination = PaginationBar()
        root.addWidget(self.pagination)
