"""Caches the current access token and refreshes it lazily."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Optional

from .clock import Clock
from .exchange import TokenExchangeClient
from .models import ServiceAccountInfo, TemporaryToken

logger = logging.getLogger(__name__)


class CacheState(str, enum.Enum):
    VALID = "valid"
    EXPIRED_OR_EMPTY = "expired_or_empty"


class CredentialCache:
    """Serves the authorization header, refreshing when the token expires.

    A token is valid while ``now < expiration_time``. Callers are serialized
    by a lock that is held across a refresh, so threads arriving during a
    refresh wait for it and then reuse its result. A failed refresh leaves
    the previous token in place; it is kept for inspection but never served
    once expired.
    """

    def __init__(
        self,
        info: ServiceAccountInfo,
        client: TokenExchangeClient,
        clock: Optional[Clock] = None,
    ) -> None:
        self.info = info
        self.client = client
        self.clock = clock or client.clock
        self._token: Optional[TemporaryToken] = None
        self._lock = threading.Lock()

    @property
    def token(self) -> Optional[TemporaryToken]:
        """The last token obtained, which may be expired."""
        return self._token

    def _state_at(self, now: int) -> CacheState:
        if self._token is not None and self._token.is_valid(now):
            return CacheState.VALID
        return CacheState.EXPIRED_OR_EMPTY

    @property
    def state(self) -> CacheState:
        return self._state_at(self.clock.now())

    def authorization_header(self) -> str:
        """Return ``"Authorization: <type> <token>"``, refreshing if needed."""
        with self._lock:
            if self._state_at(self.clock.now()) is CacheState.VALID:
                logger.debug(f"Using cached access token for {self.info.client_email}")
                return self._token.token

            try:
                self._token = self.client.refresh(self.info)
            except Exception as e:
                logger.warning(
                    f"Refreshing access token for {self.info.client_email} failed: {e}"
                )
                raise
            return self._token.token
