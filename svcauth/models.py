"""Data models shared by the credential components."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import GOOGLE_OAUTH_REFRESH_ENDPOINT, GOOGLE_OAUTH_SCOPE_CLOUD_PLATFORM


class ServiceAccountInfo(BaseModel):
    """Parsed service account key material.

    Instances are immutable; use :meth:`with_scopes` and :meth:`with_subject`
    to derive variants. ``private_key`` always holds PEM text, regardless of
    whether the key came from a JSON keyfile or a PKCS12 container.
    """

    model_config = ConfigDict(frozen=True)

    client_email: str
    private_key: str = Field(repr=False)
    private_key_id: Optional[str] = None
    token_uri: str = GOOGLE_OAUTH_REFRESH_ENDPOINT
    scopes: Tuple[str, ...] = (GOOGLE_OAUTH_SCOPE_CLOUD_PLATFORM,)
    subject: Optional[str] = None

    @field_validator("client_email", "private_key", "token_uri")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("field must not be empty")
        return value

    @field_validator("private_key_id")
    @classmethod
    def _key_id_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            raise ValueError("private_key_id must be omitted or non-empty")
        return value

    @field_validator("scopes", mode="before")
    @classmethod
    def _normalize_scopes(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return (GOOGLE_OAUTH_SCOPE_CLOUD_PLATFORM,)
        if isinstance(value, str):
            value = [value]
        ordered: Dict[str, None] = dict.fromkeys(value)
        return tuple(ordered) or (GOOGLE_OAUTH_SCOPE_CLOUD_PLATFORM,)

    def with_scopes(self, scopes: Optional[Iterable[str]]) -> "ServiceAccountInfo":
        """Return a copy using ``scopes`` (the default set when empty)."""
        data = self.model_dump()
        data["scopes"] = list(scopes) if scopes is not None else None
        return ServiceAccountInfo(**data)

    def with_subject(self, subject: Optional[str]) -> "ServiceAccountInfo":
        """Return a copy that delegates to ``subject``."""
        data = self.model_dump()
        data["subject"] = subject or None
        return ServiceAccountInfo(**data)


class TemporaryToken(BaseModel):
    """An access token rendered as a header, plus its absolute expiry."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(repr=False)
    expiration_time: int

    def is_valid(self, now: int) -> bool:
        return now < self.expiration_time


class HttpResponse(BaseModel):
    """Status, body and headers returned by an HTTP client."""

    status_code: int
    payload: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
