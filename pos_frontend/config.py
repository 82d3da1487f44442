from __future__ import annotations

import os
from typing import Optional

from PySide6.QtCore import QSettings

from .constants import (
    DEFAULT_API_URL,
    DEFAULT_OUTLET_ID,
    DEFAULT_REQUEST_TIMEOUT,
    SETTINGS_APP,
    SETTINGS_KEY_OUTLET_ID,
    SETTINGS_ORG,
)


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


API_URL = os.environ.get("POS_API_URL", DEFAULT_API_URL).rstrip("/")
API_TOKEN = os.environ.get("POS_API_TOKEN") or None
REQUEST_TIMEOUT = _env_float("POS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)


class ClientSettings:
    """
    Persisted client state (the desktop equivalent of browser local storage).

    Only the host shell reads from here; the selection dialogs and the price
    resolver receive values such as the outlet id as explicit arguments.
    """

    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings or QSettings(SETTINGS_ORG, SETTINGS_APP)

    def outlet_id(self) -> int:
        """Stored outlet id, or DEFAULT_OUTLET_ID when absent or not a positive integer."""
        raw = self._settings.value(SETTINGS_KEY_OUTLET_ID, None)
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            return DEFAULT_OUTLET_ID
        return value if value > 0 else DEFAULT_OUTLET_ID

    def set_outlet_id(self, outlet_id: int) -> None:
        self._settings.setValue(SETTINGS_KEY_OUTLET_ID, int(outlet_id))
        self._settings.sync()
