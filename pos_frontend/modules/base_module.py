from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget


class BaseModule(QObject):
    """A main-window page: owns its view and whatever feeds it."""

    def get_widget(self) -> QWidget:
        raise NotImplementedError

    def teardown(self) -> None:
        """Called once when the main window closes."""
