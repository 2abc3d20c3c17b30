"""Signs arbitrary blobs with a service account private key."""

from __future__ import annotations

from typing import Optional, Union

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .crypto import load_private_key, sign_rs256
from .errors import InvalidArgumentError
from .models import ServiceAccountInfo


def _check_signing_account(info: ServiceAccountInfo, signing_account: Optional[str]) -> None:
    if signing_account and signing_account != info.client_email:
        raise InvalidArgumentError(
            f"The current_credentials cannot sign blobs for {signing_account}"
        )


def sign_blob(
    info: ServiceAccountInfo,
    payload: Union[bytes, str],
    signing_account: Optional[str] = None,
) -> bytes:
    """Return the raw RSA-SHA256 signature of ``payload``.

    ``signing_account`` may be left empty to mean the credential's own
    account; any other account is rejected since only the holder of the
    private key can sign for it.
    """
    _check_signing_account(info, signing_account)
    return sign_rs256(payload, info.private_key)


class BlobSigner:
    """Binds :func:`sign_blob` to one service account.

    The private key is parsed on first use and kept for the signer's lifetime.
    """

    def __init__(self, info: ServiceAccountInfo) -> None:
        self.info = info
        self._key: Optional[RSAPrivateKey] = None

    def _private_key(self) -> RSAPrivateKey:
        if self._key is None:
            self._key = load_private_key(self.info.private_key)
        return self._key

    def sign_blob(
        self, payload: Union[bytes, str], signing_account: Optional[str] = None
    ) -> bytes:
        _check_signing_account(self.info, signing_account)
        return sign_rs256(payload, self._private_key())
