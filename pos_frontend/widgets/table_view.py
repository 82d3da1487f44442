from PySide6.QtWidgets import QTableView


class TableView(QTableView):
    """
    Read-only, single-row-selection table used by the lookup dialogs.

    Sorting is off: rows arrive one server page at a time, so a client-side
    sort would only reorder the visible page.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSortingEnabled(False)
        self.setAlternatingRowColors(True)
        self.setSelectionBehavior(QTableView.SelectRows)
        self.setSelectionMode(QTableView.SingleSelection)
        self.setEditTriggers(QTableView.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        self.horizontalHeader().setStretchLastSection(True)
