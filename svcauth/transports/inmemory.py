"""In-memory HTTP client for testing."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Union

from ..errors import UnavailableError
from ..models import HttpResponse
from .base import HttpClient


class RecordedRequest:
    """A request captured by :class:`InMemoryHttpClient`."""

    def __init__(self, url: str, payload: str, headers: Dict[str, str]) -> None:
        self.url = url
        self.payload = payload
        self.headers = headers


class InMemoryHttpClient(HttpClient):
    """Replays queued responses in order and records every request.

    Queue an exception instance to simulate a transport failure.
    """

    def __init__(
        self, responses: Optional[List[Union[HttpResponse, Exception]]] = None
    ) -> None:
        self._responses: Deque[Union[HttpResponse, Exception]] = deque(responses or [])
        self.requests: List[RecordedRequest] = []
        self.closed = False

    def add_response(self, response: Union[HttpResponse, Exception]) -> None:
        self._responses.append(response)

    def add_json_response(self, body: str, status_code: int = 200) -> None:
        self._responses.append(HttpResponse(status_code=status_code, payload=body))

    def post_form(
        self, url: str, payload: str, headers: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        self.requests.append(RecordedRequest(url, payload, dict(headers or {})))
        if not self._responses:
            raise UnavailableError(f"No response queued for POST {url}")
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True
