"""RS256 signing helpers shared by the assertion builder and blob signer."""

from __future__ import annotations

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from jwt.algorithms import RSAAlgorithm
from jwt.exceptions import InvalidKeyError
from jwt.utils import base64url_encode

from .errors import SigningError

_RS256 = RSAAlgorithm(RSAAlgorithm.SHA256)


def load_private_key(private_key: str) -> RSAPrivateKey:
    """Load a PEM-encoded RSA private key.

    Raises:
        SigningError: If ``private_key`` is not a usable RSA private key.
    """
    try:
        key = _RS256.prepare_key(private_key)
    except (InvalidKeyError, UnsupportedAlgorithm, ValueError, TypeError) as e:
        raise SigningError(f"Invalid private key: {e}") from e
    if not isinstance(key, RSAPrivateKey):
        raise SigningError("Invalid private key: expected an RSA private key")
    return key


def sign_rs256(
    data: Union[bytes, str], private_key: Union[str, RSAPrivateKey]
) -> bytes:
    """Return the RSASSA-PKCS1-v1_5 SHA-256 signature of ``data``.

    ``private_key`` is either PEM text or a key from :func:`load_private_key`.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if isinstance(private_key, RSAPrivateKey):
        key = private_key
    else:
        key = load_private_key(private_key)
    try:
        return _RS256.sign(data, key)
    except ValueError as e:
        raise SigningError(f"Signing failed: {e}") from e


def urlsafe_b64encode(data: Union[bytes, str]) -> str:
    """base64url without padding."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64url_encode(data).decode("ascii")
