"""Exception types raised by svcauth."""

from __future__ import annotations

from typing import Optional


class CredentialsError(Exception):
    """Base class for all credential failures."""

    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CredentialsError, ValueError):
    """Key material, inputs or token responses are malformed."""


class UnavailableError(CredentialsError):
    """The token endpoint could not be reached or returned an error status.

    Callers may retry; nothing inside svcauth retries on its own.
    """

    retryable = True

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SigningError(CredentialsError):
    """A cryptographic operation failed on the supplied key material."""
