"""Base HTTP client interface used for token exchange."""

from __future__ import annotations

import abc
from typing import Dict, Optional

from ..models import HttpResponse


class HttpClient(metaclass=abc.ABCMeta):
    """Abstract client able to POST form-encoded bodies."""

    @abc.abstractmethod
    def post_form(
        self, url: str, payload: str, headers: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        """POST ``payload`` to ``url`` and return the response.

        Implementations raise :class:`~svcauth.errors.UnavailableError` when
        the request cannot be completed at the transport level. Non-2xx
        responses are returned, not raised.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release pooled connections (no-op by default)."""
        pass
