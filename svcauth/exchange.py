"""OAuth2 JWT-bearer token exchange."""

from __future__ import annotations

import json
import logging
from typing import Optional
from urllib.parse import quote

from .assertion import assertion_components, make_jwt_assertion
from .clock import Clock, SystemClock
from .constants import JWT_BEARER_GRANT_TYPE
from .errors import InvalidArgumentError, UnavailableError
from .models import HttpResponse, ServiceAccountInfo, TemporaryToken
from .transports.base import HttpClient

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
GRANT_TYPE_ESCAPED = quote(JWT_BEARER_GRANT_TYPE, safe="")


def build_refresh_payload(
    info: ServiceAccountInfo, grant_type_escaped: str, now: int
) -> str:
    """Return the form body for the token request.

    ``grant_type`` comes first, then ``assertion``; some servers depend on it.
    """
    header, payload = assertion_components(info, now)
    assertion = make_jwt_assertion(header, payload, info.private_key)
    return f"grant_type={grant_type_escaped}&assertion={assertion}"


def parse_refresh_response(response: HttpResponse, now: int) -> TemporaryToken:
    """Turn a token endpoint response into a :class:`TemporaryToken`.

    Only the body is examined; callers check the status code first.

    Raises:
        InvalidArgumentError: If ``token_type`` or ``access_token`` is absent
            or not a non-empty string.
    """
    try:
        body = json.loads(response.payload)
    except ValueError:
        body = None

    if not isinstance(body, dict) or not all(
        isinstance(body.get(field), str) and body[field]
        for field in ("token_type", "access_token")
    ):
        raise InvalidArgumentError(
            "Could not find all required fields in response (access_token,"
            f" token_type) while trying to obtain an access token for service"
            f" account credentials. status={response.status_code}"
        )

    try:
        expires_in = int(body.get("expires_in") or 0)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"Invalid expires_in value in token response: {body.get('expires_in')!r}"
        ) from e
    header = f"Authorization: {body['token_type']} {body['access_token']}"
    return TemporaryToken(token=header, expiration_time=now + expires_in)


class TokenExchangeClient:
    """Exchanges signed assertions for access tokens."""

    def __init__(self, http: HttpClient, clock: Optional[Clock] = None) -> None:
        self.http = http
        self.clock = clock or SystemClock()

    def refresh(self, info: ServiceAccountInfo) -> TemporaryToken:
        """Request a fresh access token for ``info``.

        Raises:
            UnavailableError: On transport failures or non-2xx responses.
            InvalidArgumentError: If the response lacks required fields.
            SigningError: If the assertion cannot be signed.
        """
        now = self.clock.now()
        body = build_refresh_payload(info, GRANT_TYPE_ESCAPED, now)
        logger.debug(f"Requesting access token for {info.client_email} from {info.token_uri}")

        response = self.http.post_form(
            info.token_uri, body, headers={"Content-Type": FORM_CONTENT_TYPE}
        )
        if not 200 <= response.status_code < 300:
            raise UnavailableError(
                f"Token endpoint {info.token_uri} returned status"
                f" {response.status_code}: {response.payload}",
                status_code=response.status_code,
            )

        token = parse_refresh_response(response, now)
        logger.info(
            f"Obtained access token for {info.client_email}, expires at {token.expiration_time}"
        )
        return token
