from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QVBoxLayout, QWidget


def wrap_center(w: QWidget) -> QWidget:
    host = QWidget()
    lay = QVBoxLayout(host)
    lay.addStretch(1)
    lay.addWidget(w, 0, Qt.AlignCenter)
    lay.addStretch(1)
    return host


def error(parent: QWidget, title: str, text: str):
    QMessageBox.critical(parent, title, text)
