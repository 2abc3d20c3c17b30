"""Service account credentials: cached authorization headers and blob signing."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .cache import CredentialCache
from .clock import Clock, SystemClock
from .config import CredentialsConfig, load_config
from .constants import DEFAULT_P12_PASSWORD
from .errors import InvalidArgumentError
from .exchange import TokenExchangeClient
from .keyfile import (
    PathLike,
    parse_service_account_file,
    parse_service_account_json,
    parse_service_account_json_file,
    parse_service_account_p12_file,
)
from .models import ServiceAccountInfo
from .signer import BlobSigner
from .transports import HttpClient, get_http_client

logger = logging.getLogger(__name__)


class ServiceAccountCredentials:
    """Credentials backed by a service account private key.

    Example:
        creds = create_service_account_credentials_from_json_file_path("key.json")
        headers = [creds.authorization_header()]
    """

    def __init__(
        self,
        info: ServiceAccountInfo,
        http: Optional[HttpClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.clock = clock or SystemClock()
        self.http = http or get_http_client()
        self._cache = CredentialCache(
            info, TokenExchangeClient(self.http, self.clock), self.clock
        )
        self._signer = BlobSigner(info)

    @property
    def info(self) -> ServiceAccountInfo:
        return self._cache.info

    @property
    def account_email(self) -> str:
        return self.info.client_email

    @property
    def key_id(self) -> Optional[str]:
        return self.info.private_key_id

    def authorization_header(self) -> str:
        """Return the ``Authorization`` header line, refreshing if expired."""
        return self._cache.authorization_header()

    def sign_blob(
        self, signing_account: Optional[str], blob: Union[bytes, str]
    ) -> bytes:
        """Sign ``blob`` as ``signing_account`` (empty means this account)."""
        return self._signer.sign_blob(blob, signing_account)

    def close(self) -> None:
        """Release the HTTP client's connections."""
        self.http.close()

    def __enter__(self) -> "ServiceAccountCredentials":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _customize(
    info: ServiceAccountInfo,
    scopes: Optional[Iterable[str]],
    subject: Optional[str],
) -> ServiceAccountInfo:
    if scopes is not None:
        info = info.with_scopes(scopes)
    if subject is not None:
        info = info.with_subject(subject)
    return info


def create_service_account_credentials_from_json_contents(
    contents: Union[str, bytes],
    scopes: Optional[Iterable[str]] = None,
    subject: Optional[str] = None,
    http: Optional[HttpClient] = None,
    clock: Optional[Clock] = None,
) -> ServiceAccountCredentials:
    info = parse_service_account_json(contents, "memory")
    return ServiceAccountCredentials(_customize(info, scopes, subject), http, clock)


def create_service_account_credentials_from_json_file_path(
    path: PathLike,
    scopes: Optional[Iterable[str]] = None,
    subject: Optional[str] = None,
    http: Optional[HttpClient] = None,
    clock: Optional[Clock] = None,
) -> ServiceAccountCredentials:
    info = parse_service_account_json_file(path)
    return ServiceAccountCredentials(_customize(info, scopes, subject), http, clock)


def create_service_account_credentials_from_p12_file_path(
    path: PathLike,
    scopes: Optional[Iterable[str]] = None,
    subject: Optional[str] = None,
    password: str = DEFAULT_P12_PASSWORD,
    http: Optional[HttpClient] = None,
    clock: Optional[Clock] = None,
) -> ServiceAccountCredentials:
    info = parse_service_account_p12_file(path, password)
    return ServiceAccountCredentials(_customize(info, scopes, subject), http, clock)


def create_service_account_credentials_from_file_path(
    path: PathLike,
    scopes: Optional[Iterable[str]] = None,
    subject: Optional[str] = None,
    http: Optional[HttpClient] = None,
    clock: Optional[Clock] = None,
) -> ServiceAccountCredentials:
    """Load a JSON or PKCS12 keyfile, picked by file extension."""
    info = parse_service_account_file(path)
    return ServiceAccountCredentials(_customize(info, scopes, subject), http, clock)


def create_service_account_credentials_from_config(
    config: Optional[CredentialsConfig] = None,
    http: Optional[HttpClient] = None,
    clock: Optional[Clock] = None,
) -> ServiceAccountCredentials:
    """Build credentials from the keyfile named in configuration.

    Raises:
        InvalidArgumentError: If no keyfile is configured or it cannot be parsed.
    """
    config = config or load_config()
    if not config.key_file:
        raise InvalidArgumentError(
            "No service account keyfile configured; set key_file,"
            " SVCAUTH_KEY_FILE or GOOGLE_APPLICATION_CREDENTIALS"
        )

    info = parse_service_account_file(
        config.key_file,
        default_token_uri=config.token_uri,
        password=config.key_file_password,
    )
    info = _customize(info, config.scopes or None, config.subject)
    logger.info(f"Loaded service account {info.client_email} from {config.key_file}")
    return ServiceAccountCredentials(info, http or get_http_client(config), clock)
