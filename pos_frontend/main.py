from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from .api.client import ApiClient
from .api.customers_repo import CustomersRepo
from .api.invoices_repo import InvoicesRepo
from .api.items_repo import ItemsRepo
from .api.stocks_repo import StocksRepo
from .constants import APP_NAME
from .modules.base_module import BaseModule
from .utils.loggers import get_logger
from .utils.ui_helpers import error, wrap_center

_log = logging.getLogger(__name__)

ModuleFactory = Callable[[], BaseModule]


class MainWindow(QMainWindow):
    """
    Left navigation list + stacked pages. Pages are built the first time
    they are shown; a page that fails to build is replaced by a message.
    """

    def __init__(self, client: ApiClient, *, runner=None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setWindowFlag(Qt.WindowMinimizeButtonHint, True)
        self.setWindowFlag(Qt.WindowMaximizeButtonHint, True)
        self.setMinimumSize(820, 520)

        self.client = client
        self.runner = runner

        # ---- Central layout: left nav + stacked pages ----
        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.setCentralWidget(central)

        self.nav = QListWidget()
        self.nav.setFixedWidth(100)
        self.nav.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)
        self.stack = QStackedWidget()

        row = QWidget()
        row_lay = QHBoxLayout(row)
        row_lay.addWidget(self.nav)
        row_lay.addWidget(self.stack, 1)
        layout.addWidget(row, 1)

        self._factories: list[tuple[str, ModuleFactory]] = []
        self.modules: dict[int, Optional[BaseModule]] = {}

        self.nav.currentRowChanged.connect(self._on_nav_item_changed)

        self._add_module_deferred("POS", self._make_pos)
        self._add_module_deferred("Stock", self._make_stock)

        if self.nav.count():
            self.nav.setCurrentRow(0)
            self._load_module_at_index(0)

    # ---------- module factories ----------
    def _make_pos(self) -> BaseModule:
        from .modules.pos.controller import PosController
        return PosController(
            CustomersRepo(self.client),
            ItemsRepo(self.client),
            StocksRepo(self.client),
            InvoicesRepo(self.client),
            runner=self.runner,
        )

    def _make_stock(self) -> BaseModule:
        from .modules.stock.controller import StockController
        return StockController(StocksRepo(self.client), runner=self.runner)

    # ---------- deferred loading ----------
    def _add_module_deferred(self, title: str, factory: ModuleFactory):
        self._factories.append((title, factory))
        self.stack.addWidget(wrap_center(QLabel(f"Loading {title}...")))
        self.nav.addItem(QListWidgetItem(title))

    def _on_nav_item_changed(self, index: int):
        if index < 0 or index >= len(self._factories):
            return
        self._load_module_at_index(index)

    def _load_module_at_index(self, index: int):
        if index not in self.modules:
            self._load_module(index)
        self.stack.setCurrentIndex(index)

    def _load_module(self, index: int):
        title, factory = self._factories[index]
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            controller = factory()
        except Exception as e:
            _log.exception("[%s] failed to load", title)
            self.modules[index] = None
            self._replace_widget(index, wrap_center(QLabel(f"{title}\n\nLoading failed")))
            error(self, title, f"Could not open {title}:\n{e}")
            return
        finally:
            QApplication.restoreOverrideCursor()
        self.modules[index] = controller
        self._replace_widget(index, controller.get_widget())

    def _replace_widget(self, index: int, widget: QWidget):
        current = self.stack.widget(index)
        self.stack.removeWidget(current)
        current.deleteLater()
        self.stack.insertWidget(index, widget)

    def module(self, title: str) -> Optional[BaseModule]:
        """Loaded controller for a nav title, loading it on demand."""
        for i, (t, _f) in enumerate(self._factories):
            if t == title:
                self._load_module_at_index(i)
                return self.modules.get(i)
        return None

    def closeEvent(self, event):
        for controller in self.modules.values():
            if controller is not None:
                controller.teardown()
        super().closeEvent(event)


def main():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    get_logger("pos_frontend")

    client = ApiClient()
    _log.info("API base URL: %s", client.base_url)

    win = MainWindow(client)
    win.resize(900, 560)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
