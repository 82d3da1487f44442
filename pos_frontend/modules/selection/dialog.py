from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from ...widgets.pagination import PaginationBar
from ...widgets.table_view import TableView
from .model import EntityTableModel


class SelectionDialog(QDialog):
    """
    Search + paginate + pick exactly one row.

    Lifecycle:
      open      pager running, nothing selected, confirm disabled
      selected  a row was clicked; clicking it again changes nothing,
                clicking another row replaces it
      confirm   emits `selected(payload)` then `closed()`, then accept()
      cancel    Cancel button, Esc or window close: emits only `closed()`

    The selection is never cleared by a refresh. When the picked entity shows
    up on the freshly loaded page it is highlighted again.

    Subclasses provide the pager and table model, start the first load in
    `_start()`, and may override `selection_payload()` (what gets emitted),
    `_on_selection_changed()` and `empty_text()`.
    """

    selected = Signal(object)
    closed = Signal()

    def __init__(
        self,
        pager,
        model: EntityTableModel,
        *,
        title: str,
        placeholder: str,
        confirm_text: str = "Select",
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)

        self.pager = pager
        self.model = model
        self._current: Optional[Any] = None
        self._done = False
        self._syncing = False

        root = QVBoxLayout(self)

        # ---- search ----
        self.search = QLineEdit()
        self.search.setPlaceholderText(placeholder)
        self.search.setClearButtonEnabled(True)
        root.addWidget(self.search)

        # ---- results ----
        self.table = TableView()
        self.table.setModel(self.model)
        root.addWidget(self.table, 1)

        self.lbl_status = QLabel("")
        self.lbl_status.setStyleSheet("color:#666;")
        root.addWidget(self.lbl_status)

        self.pagination = PaginationBar()
        root.addWidget(self.pagination)

        # ---- subclass fields (quantity, prices, ...) ----
        self.extras = QVBoxLayout()
        root.addLayout(self.extras)

        # ---- buttons ----
        buttons = QHBoxLayout()
        self.lbl_selected = QLabel("Selected: None")
        buttons.addWidget(self.lbl_selected)
        buttons.addStretch(1)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_confirm = QPushButton(confirm_text)
        self.btn_confirm.setEnabled(False)
        self.btn_confirm.setDefault(True)
        buttons.addWidget(self.btn_cancel)
        buttons.addWidget(self.btn_confirm)
        root.addLayout(buttons)

        # ---- wiring ----
        self.search.textChanged.connect(self.pager.set_query)
        self.pagination.pageRequested.connect(self.pager.set_page)
        self.pager.changed.connect(self._render)
        self.table.selectionModel().selectionChanged.connect(self._on_table_selection)
        self.table.doubleClicked.connect(self._on_double_clicked)
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_confirm.clicked.connect(self.confirm)

        self.resize(900, 560)

    # ------------------------------------------------------------------ #
    # Hooks
    # ------------------------------------------------------------------ #

    def _start(self) -> None:
        raise NotImplementedError

    def selection_payload(self, entity: Any) -> Any:
        return entity

    def selection_label(self, entity: Any) -> str:
        return str(self.model.key(entity))

    def empty_text(self) -> str:
        return "No results found"

    def _on_selection_changed(self, entity: Any) -> None:
        pass

    def _on_shutdown(self) -> None:
        pass

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #

    @property
    def current(self) -> Optional[Any]:
        return self._current

    @property
    def is_finished(self) -> bool:
        return self._done

    def select_row(self, row: int) -> None:
        if row < 0 or row >= self.model.rowCount():
            return
        entity = self.model.at(row)
        if self._current is not None and self.model.key(self._current) == self.model.key(entity):
            return
        self._current = entity
        self.btn_confirm.setEnabled(True)
        self.lbl_selected.setText(f"Selected: {self.selection_label(entity)}")
        self._highlight(row)
        self._on_selection_changed(entity)

    def _on_table_selection(self, *args) -> None:
        if self._syncing:
            return
        rows = self.table.selectionModel().selectedRows()
        if rows:
            self.select_row(rows[0].row())

    def _on_double_clicked(self, index) -> None:
        self.select_row(index.row())
        self.confirm()

    def _highlight(self, row: int) -> None:
        self._syncing = True
        try:
            self.table.selectRow(row)
        finally:
            self._syncing = False

    # ------------------------------------------------------------------ #
    # Exit protocol
    # ------------------------------------------------------------------ #

    def confirm(self) -> None:
        if self._done or self._current is None:
            return
        payload = self.selection_payload(self._current)
        self._shutdown()
        self.selected.emit(payload)
        self.closed.emit()
        super().accept()

    def reject(self) -> None:
        if not self._done:
            self._shutdown()
            self.closed.emit()
        super().reject()

    def _shutdown(self) -> None:
        self._done = True
        self.pager.close()
        self._on_shutdown()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def _render(self) -> None:
        if self._done:
            return
        p = self.pager
        self._syncing = True
        try:
            self.model.replace(p.items, p.first_row_number())
            if self._current is not None:
                row = self.model.row_of(self.model.key(self._current))
                if row >= 0:
                    self.table.selectRow(row)
        finally:
            self._syncing = False
        self.table.resizeColumnsToContents()
        self.pagination.set_state(p.page, p.total_pages)
        self.lbl_status.setText(self._status_text())

    def _status_text(self) -> str:
        p = self.pager
        if p.error:
            return f"Could not load results: {p.error}"
        if p.loading and not p.items:
            return "Loading…"
        if not p.loading and not p.items:
            return self.empty_text()
        return ""
