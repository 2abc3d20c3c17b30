"""svcauth: service account credentials for cloud API clients."""

from .assertion import assertion_components, make_jwt_assertion
from .cache import CacheState, CredentialCache
from .clock import Clock, FakeClock, SystemClock
from .config import CredentialsConfig, load_config
from .credentials import (
    ServiceAccountCredentials,
    create_service_account_credentials_from_config,
    create_service_account_credentials_from_file_path,
    create_service_account_credentials_from_json_contents,
    create_service_account_credentials_from_json_file_path,
    create_service_account_credentials_from_p12_file_path,
)
from .errors import CredentialsError, InvalidArgumentError, SigningError, UnavailableError
from .exchange import TokenExchangeClient, build_refresh_payload, parse_refresh_response
from .keyfile import (
    parse_service_account_file,
    parse_service_account_json,
    parse_service_account_json_file,
    parse_service_account_p12,
    parse_service_account_p12_file,
)
from .models import HttpResponse, ServiceAccountInfo, TemporaryToken
from .signer import BlobSigner, sign_blob
from .transports import HttpClient, InMemoryHttpClient, RequestsHttpClient, get_http_client

__version__ = "0.1.0"
__all__ = [
    "BlobSigner",
    "CacheState",
    "Clock",
    "CredentialCache",
    "CredentialsConfig",
    "CredentialsError",
    "FakeClock",
    "HttpClient",
    "HttpResponse",
    "InMemoryHttpClient",
    "InvalidArgumentError",
    "RequestsHttpClient",
    "ServiceAccountCredentials",
    "ServiceAccountInfo",
    "SigningError",
    "SystemClock",
    "TemporaryToken",
    "TokenExchangeClient",
    "UnavailableError",
    "assertion_components",
    "build_refresh_payload",
    "create_service_account_credentials_from_config",
    "create_service_account_credentials_from_file_path",
    "create_service_account_credentials_from_json_contents",
    "create_service_account_credentials_from_json_file_path",
    "create_service_account_credentials_from_p12_file_path",
    "get_http_client",
    "load_config",
    "make_jwt_assertion",
    "parse_refresh_response",
    "parse_service_account_file",
    "parse_service_account_json",
    "parse_service_account_json_file",
    "parse_service_account_p12",
    "parse_service_account_p12_file",
    "sign_blob",
]
