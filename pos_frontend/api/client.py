from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .. import config

_log = logging.getLogger(__name__)


class NetworkFailure(Exception):
    """A request could not be completed (connection error, timeout, non-2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """
    Thin JSON-over-HTTP client for the POS backend.

    Only GET is needed by the lookup dialogs. Responses are returned decoded
    but otherwise untouched; shaping them is `normalize.to_page`'s job.
    A body that is not JSON comes back as None (logged), which the
    normalizer treats as an empty result.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        token = config.API_TOKEN if token is None else token
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = self.url(path)
        _log.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkFailure(f"GET {path} failed with HTTP {status}", status_code=status) from e
        except requests.RequestException as e:
            raise NetworkFailure(f"GET {path} failed: {e}") from e

        try:
            return resp.json()
        except ValueError:
            _log.warning("GET %s returned a non-JSON body", path)
            return None
