"""Builds the signed JWT assertion exchanged for an access token."""

from __future__ import annotations

import json
from typing import Any, Dict, Tuple

from .constants import JWT_LIFETIME_SECONDS
from .crypto import sign_rs256, urlsafe_b64encode
from .models import ServiceAccountInfo


def _dump(claims: Dict[str, Any]) -> str:
    # The signed bytes must not depend on dict construction order.
    return json.dumps(claims, sort_keys=True, separators=(",", ":"))


def assertion_components(info: ServiceAccountInfo, now: int) -> Tuple[str, str]:
    """Return the ``(header_json, payload_json)`` pair for ``info`` at ``now``."""
    header: Dict[str, Any] = {"alg": "RS256", "typ": "JWT"}
    if info.private_key_id:
        header["kid"] = info.private_key_id

    payload: Dict[str, Any] = {
        "iss": info.client_email,
        "scope": " ".join(info.scopes),
        "aud": info.token_uri,
        "iat": now,
        "exp": now + JWT_LIFETIME_SECONDS,
    }
    if info.subject:
        payload["sub"] = info.subject

    return _dump(header), _dump(payload)


def make_jwt_assertion(header_json: str, payload_json: str, private_key: str) -> str:
    """Encode and sign the header and payload as a compact JWT.

    Raises:
        SigningError: If ``private_key`` cannot be used for RS256.
    """
    signing_input = f"{urlsafe_b64encode(header_json)}.{urlsafe_b64encode(payload_json)}"
    signature = sign_rs256(signing_input, private_key)
    return f"{signing_input}.{urlsafe_b64encode(signature)}"
