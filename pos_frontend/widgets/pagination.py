from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget


class PaginationBar(QWidget):
    """Prev / "Page X of Y" / next. Emits pageRequested(target_page)."""

    pageRequested = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._page = 1
        self._total_pages = 1

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        self.btn_prev = QPushButton("◀")
        self.btn_next = QPushButton("▶")
        self.lbl = QLabel()
        for b in (self.btn_prev, self.btn_next):
            b.setFixedWidth(40)
        lay.addWidget(self.btn_prev)
        lay.addWidget(self.lbl)
        lay.addWidget(self.btn_next)
        lay.addStretch(1)

        self.btn_prev.clicked.connect(lambda: self.pageRequested.emit(self._page - 1))
        self.btn_next.clicked.connect(lambda: self.pageRequested.emit(self._page + 1))
        self.set_state(1, 1)

    def set_state(self, page: int, total_pages: int):
        self._page = max(1, int(page))
        self._total_pages = max(1, int(total_pages))
        self.lbl.setText(f"Page {self._page} of {self._total_pages}")
        self.btn_prev.setEnabled(self._page > 1)
        self.btn_next.setEnabled(self._page < self._total_pages)
