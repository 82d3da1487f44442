"""POS front end: lookup dialogs and stock browser over the POS REST API."""

__version__ = "0.1.0"
