"""HTTP client backed by the requests library."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from ..errors import UnavailableError
from ..models import HttpResponse
from .base import HttpClient

logger = logging.getLogger(__name__)


class RequestsHttpClient(HttpClient):
    """Blocking client that reuses a single :class:`requests.Session`."""

    def __init__(
        self, timeout: float = 30.0, session: Optional[requests.Session] = None
    ) -> None:
        self.timeout = timeout
        self._session = session or requests.Session()

    def post_form(
        self, url: str, payload: str, headers: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        try:
            resp = self._session.post(
                url, data=payload, headers=headers or {}, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning(f"POST {url} failed: {e}")
            raise UnavailableError(f"Error sending request to {url}: {e}") from e

        return HttpResponse(
            status_code=resp.status_code,
            payload=resp.text,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        self._session.close()
