from __future__ import annotations

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel

from .constants import DEFAULT_P12_PASSWORD


class HttpConfig(BaseModel):
    """Settings for the token endpoint HTTP client."""

    timeout: float = 30.0


class CredentialsConfig(BaseModel):
    """Top-level configuration model."""

    key_file: Optional[str] = None
    key_file_password: str = DEFAULT_P12_PASSWORD
    token_uri: Optional[str] = None
    scopes: List[str] = []
    subject: Optional[str] = None
    http: HttpConfig = HttpConfig()


def load_config(path: Optional[str] = None) -> CredentialsConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to SVCAUTH_CONFIG env
            variable or 'svcauth.yaml' in the current directory.
    """

    config_path = path or os.getenv("SVCAUTH_CONFIG", "svcauth.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = CredentialsConfig(**data)
    else:
        config = CredentialsConfig()

    env_key_file = os.getenv("SVCAUTH_KEY_FILE") or os.getenv(
        "GOOGLE_APPLICATION_CREDENTIALS"
    )
    if env_key_file:
        config.key_file = env_key_file
    if os.getenv("SVCAUTH_TOKEN_URI"):
        config.token_uri = os.environ["SVCAUTH_TOKEN_URI"]
    if os.getenv("SVCAUTH_SUBJECT"):
        config.subject = os.environ["SVCAUTH_SUBJECT"]
    if os.getenv("SVCAUTH_HTTP_TIMEOUT"):
        config.http.timeout = float(os.environ["SVCAUTH_HTTP_TIMEOUT"])
    return config
