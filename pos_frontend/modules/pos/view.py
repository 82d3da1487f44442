from __future__ import annotations

from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...widgets.table_view import TableView


class PosView(QWidget):
    """
    Invoice composer page:
      - toolbar: Customer / Add Product / Recall Invoice / Clear
      - header: outlet, customer, recalled invoice
      - product lines table
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        bar = QHBoxLayout()
        self.btn_customer = QPushButton("Select Customer")
        self.btn_product = QPushButton("Add Product")
        self.btn_recall = QPushButton("Recall Invoice")
        self.btn_clear = QPushButton("Clear")
        for b in (self.btn_customer, self.btn_product, self.btn_recall):
            bar.addWidget(b)
        bar.addStretch(1)
        bar.addWidget(self.btn_clear)
        root.addLayout(bar)

        header = QFormLayout()
        self.lbl_outlet = QLabel("-")
        self.lbl_customer = QLabel("-")
        self.lbl_customer.setObjectName("customerLabel")
        self.lbl_invoice = QLabel("-")
        self.lbl_invoice.setObjectName("invoiceLabel")
        header.addRow("Outlet:", self.lbl_outlet)
        header.addRow("Customer:", self.lbl_customer)
        header.addRow("Recalled:", self.lbl_invoice)
        root.addLayout(header)

        self.lines = TableView()
        root.addWidget(self.lines, 1)
