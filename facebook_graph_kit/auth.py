"""
Facebook OAuth2 delegate

Token exchange and refresh are handled by requests-oauthlib. This module only
feeds it the app credentials, scopes and Facebook endpoints, and runs the
blocking calls in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from requests_oauthlib import OAuth2Session
from requests_oauthlib.compliance_fixes import facebook_compliance_fix

from .config import FacebookConfig
from .exceptions import FacebookRevokeError, FacebookValidationError
from .models import Token

if TYPE_CHECKING:
    from .session import GraphSession

logger = logging.getLogger("facebook.auth")


class FacebookOAuth2:
    def __init__(self, config: FacebookConfig):
        self.config = config

    @property
    def client_id(self) -> str:
        return self.config.oauth2.client_id

    @property
    def client_secret(self) -> str:
        return self.config.oauth2.client_secret

    @property
    def scopes(self) -> list[str]:
        return list(self.config.oauth2.scopes)

    def with_scopes(self, *scopes: str) -> "FacebookOAuth2":
        oauth2 = self.config.oauth2.model_copy(update={"scopes": list(scopes)})
        return FacebookOAuth2(self.config.model_copy(update={"oauth2": oauth2}))

    def oauth2_session(self, token: Optional[Dict[str, Any]] = None) -> OAuth2Session:
        session = OAuth2Session(
            client_id=self.client_id,
            redirect_uri=self.config.oauth2.redirect_url or None,
            scope=self.scopes or None,
            token=token,
        )
        return facebook_compliance_fix(session)

    def auth_code_url(self, state: str, **kwargs: Any) -> str:
        url, _ = self.oauth2_session().authorization_url(self.config.auth_url, state=state, **kwargs)
        return url

    async def exchange_code(self, code: str) -> Token:
        if not code:
            raise FacebookValidationError("code", "is required")

        def _fetch() -> Dict[str, Any]:
            return self.oauth2_session().fetch_token(
                self.config.token_url,
                code=code,
                client_secret=self.client_secret,
                include_client_id=True,
                timeout=self.config.timeout,
            )

        token = await asyncio.to_thread(_fetch)
        logger.info("Facebook OAuth2 code exchanged for client %s", self.client_id)
        return Token.from_oauthlib(token)

    async def access_token(self, refresh_token: str) -> Token:
        if not refresh_token:
            raise FacebookValidationError("refresh_token", "is required")

        def _refresh() -> Dict[str, Any]:
            return self.oauth2_session().refresh_token(
                self.config.token_url,
                refresh_token=refresh_token,
                client_id=self.client_id,
                client_secret=self.client_secret,
                timeout=self.config.timeout,
            )

        token = await asyncio.to_thread(_refresh)
        logger.info("Facebook OAuth2 token refreshed for client %s", self.client_id)
        return Token.from_oauthlib(token)

    async def revoke(self, session: "GraphSession", refresh_token: str) -> None:
        """
        Revoke a token through the Graph API.

        Needs an authorized session; the app credentials are sent alongside the
        token being revoked.

        Raises:
            FacebookRevokeError: If the API answers without success
        """
        result = await session.get(
            "/oauth/revoke",
            params={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "revoke_token": refresh_token,
            },
        )
        if not result.get("success"):
            logger.info("Facebook token revocation refused for client %s", self.client_id)
            raise FacebookRevokeError()
