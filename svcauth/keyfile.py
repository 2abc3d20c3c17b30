"""Parsers turning service account key material into :class:`ServiceAccountInfo`.

Two formats are supported: the JSON keyfile downloaded from the cloud console
and the legacy PKCS12 (``.p12``) container. Decoding of PKCS12 and of the
keys themselves is left to :mod:`cryptography`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import pkcs12
from cryptography.x509.oid import NameOID

from .constants import DEFAULT_P12_PASSWORD, GOOGLE_OAUTH_REFRESH_ENDPOINT
from .errors import InvalidArgumentError
from .models import ServiceAccountInfo

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("private_key_id", "private_key", "client_email")
_P12_SUFFIXES = (".p12", ".pfx")

PathLike = Union[str, Path]


def _field_error(field: str, problem: str, source: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Invalid ServiceAccountCredentials, the {field} field is {problem}"
        f" on data loaded from {source}"
    )


def _required_string(data: Dict[str, Any], field: str, source: str) -> str:
    if field not in data:
        raise _field_error(field, "missing", source)
    value = data[field]
    if not isinstance(value, str) or not value:
        raise _field_error(field, "empty", source)
    return value


def parse_service_account_json(
    contents: Union[str, bytes],
    source: str,
    default_token_uri: Optional[str] = None,
) -> ServiceAccountInfo:
    """Parse a JSON service account keyfile.

    Args:
        contents: The keyfile text.
        source: Label naming where ``contents`` came from; embedded in every
            error message.
        default_token_uri: Token endpoint used when the keyfile has no
            ``token_uri``. The built-in Google endpoint is used when this is
            also empty.

    Raises:
        InvalidArgumentError: If the text is not JSON, is not a JSON object,
            or a required field is missing or empty.
    """
    try:
        data = json.loads(contents)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"Invalid ServiceAccountCredentials, parsing failed on data loaded from {source}"
        ) from e

    if not isinstance(data, dict):
        raise InvalidArgumentError(
            "Invalid ServiceAccountCredentials, the document is not a JSON object"
            f" on data loaded from {source}"
        )

    fields = {name: _required_string(data, name, source) for name in _REQUIRED_FIELDS}

    if "token_uri" in data:
        token_uri = _required_string(data, "token_uri", source)
    else:
        token_uri = default_token_uri or GOOGLE_OAUTH_REFRESH_ENDPOINT

    info = ServiceAccountInfo(token_uri=token_uri, **fields)
    logger.debug(f"Parsed service account {info.client_email} from {source}")
    return info


def parse_service_account_p12(
    contents: bytes,
    password: str = DEFAULT_P12_PASSWORD,
    source: str = "memory",
) -> ServiceAccountInfo:
    """Parse a PKCS12 container holding a service account key.

    The account identity is the commonName of the certificate subject. PKCS12
    keys have no key id, so ``private_key_id`` is ``None``.
    """
    try:
        key, cert, extra_certs = pkcs12.load_key_and_certificates(
            contents, password.encode("utf-8") if password else None
        )
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"Cannot parse PKCS#12 data loaded from {source}: {e}"
        ) from e

    if key is None:
        raise InvalidArgumentError(
            f"No private key found in PKCS#12 data loaded from {source}"
        )
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidArgumentError(
            f"Expected an RSA private key in PKCS#12 data loaded from {source}"
        )

    if cert is None and extra_certs:
        cert = extra_certs[0]
    if cert is None:
        raise InvalidArgumentError(
            f"No certificate found in PKCS#12 data loaded from {source}"
        )

    names = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not names or not names[0].value:
        raise InvalidArgumentError(
            f"Certificate in PKCS#12 data loaded from {source} has no commonName"
        )
    client_email = str(names[0].value)

    pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("ascii")

    info = ServiceAccountInfo(client_email=client_email, private_key=pem)
    logger.debug(f"Parsed service account {info.client_email} from {source}")
    return info


def _read_key_file(path: PathLike) -> bytes:
    try:
        contents = Path(path).read_bytes()
    except OSError as e:
        raise InvalidArgumentError(f"Cannot open credentials file {path}: {e}") from e
    if not contents:
        raise InvalidArgumentError(f"Credentials file {path} is empty")
    return contents


def parse_service_account_json_file(
    path: PathLike, default_token_uri: Optional[str] = None
) -> ServiceAccountInfo:
    """Read and parse a JSON keyfile from ``path``."""
    contents = _read_key_file(path)
    return parse_service_account_json(contents, str(path), default_token_uri)


def parse_service_account_p12_file(
    path: PathLike, password: str = DEFAULT_P12_PASSWORD
) -> ServiceAccountInfo:
    """Read and parse a PKCS12 keyfile from ``path``."""
    contents = _read_key_file(path)
    return parse_service_account_p12(contents, password, source=str(path))


def parse_service_account_file(
    path: PathLike,
    default_token_uri: Optional[str] = None,
    password: str = DEFAULT_P12_PASSWORD,
) -> ServiceAccountInfo:
    """Parse a keyfile, choosing the format from the file extension."""
    if str(path).lower().endswith(_P12_SUFFIXES):
        return parse_service_account_p12_file(path, password)
    return parse_service_account_json_file(path, default_token_uri)
