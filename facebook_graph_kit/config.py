"""
Facebook Graph configuration

Holds the API version and the OAuth2 application settings. Values can be
given directly or read from FACEBOOK_* environment variables.
"""

from __future__ import annotations

import os
from typing import List

from pydantic import BaseModel, Field, field_validator

from .exceptions import FacebookValidationError

GRAPH_BASE = "https://graph.facebook.com"
DIALOG_BASE = "https://www.facebook.com"
DEFAULT_VERSION = "v21.0"
DEFAULT_TIMEOUT = 30.0


class OAuth2Config(BaseModel):
    client_id: str = Field(..., min_length=1)
    client_secret: str = Field(..., min_length=1)
    scopes: List[str] = Field(default_factory=list)
    redirect_url: str = ""


class FacebookConfig(BaseModel):
    version: str = DEFAULT_VERSION
    oauth2: OAuth2Config
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    enable_appsecret_proof: bool = False

    @field_validator("version", mode="before")
    @classmethod
    def strip_version(cls, v):
        return (v or "").strip().strip("/")

    @property
    def auth_url(self) -> str:
        return f"{DIALOG_BASE}/{self.version}/dialog/oauth"

    @property
    def token_url(self) -> str:
        return f"{GRAPH_BASE}/{self.version}/oauth/access_token"

    @classmethod
    def from_env(cls, prefix: str = "FACEBOOK_") -> "FacebookConfig":
        """
        Build a config from environment variables.

        Reads {prefix}VERSION, {prefix}OAUTH2_CLIENT_ID, {prefix}OAUTH2_CLIENT_SECRET,
        {prefix}OAUTH2_SCOPES (comma separated), {prefix}OAUTH2_REDIRECT_URL,
        {prefix}TIMEOUT and {prefix}APPSECRET_PROOF.

        Raises:
            FacebookValidationError: If a required variable is missing or malformed
        """
        def env(name: str) -> str:
            return os.getenv(f"{prefix}{name}", "").strip()

        client_id = env("OAUTH2_CLIENT_ID")
        if not client_id:
            raise FacebookValidationError(f"{prefix}OAUTH2_CLIENT_ID", "environment variable is required")
        client_secret = env("OAUTH2_CLIENT_SECRET")
        if not client_secret:
            raise FacebookValidationError(f"{prefix}OAUTH2_CLIENT_SECRET", "environment variable is required")

        timeout = DEFAULT_TIMEOUT
        if env("TIMEOUT"):
            try:
                timeout = float(env("TIMEOUT"))
            except ValueError:
                raise FacebookValidationError(f"{prefix}TIMEOUT", "must be a number of seconds")

        return cls(
            version=env("VERSION") or DEFAULT_VERSION,
            oauth2=OAuth2Config(
                client_id=client_id,
                client_secret=client_secret,
                scopes=[s.strip() for s in env("OAUTH2_SCOPES").split(",") if s.strip()],
                redirect_url=env("OAUTH2_REDIRECT_URL"),
            ),
            timeout=timeout,
            enable_appsecret_proof=env("APPSECRET_PROOF").lower() in ("1", "true", "yes"),
        )
