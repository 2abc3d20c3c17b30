"""HTTP client factory."""

from __future__ import annotations

from typing import Optional

from ..config import CredentialsConfig, load_config
from .base import HttpClient
from .inmemory import InMemoryHttpClient
from .requests_client import RequestsHttpClient


def get_http_client(config: Optional[CredentialsConfig] = None) -> HttpClient:
    """Return the production HTTP client configured by ``config``."""

    config = config or load_config()
    return RequestsHttpClient(timeout=config.http.timeout)


__all__ = ["HttpClient", "InMemoryHttpClient", "RequestsHttpClient", "get_http_client"]
