from __future__ import annotations
import logging
from typing import Any, List, Optional, Union
import httpx
from . import operations
from .auth import FacebookOAuth2
from .config import FacebookConfig
from .exceptions import FacebookAuthError
from .models import (
    AddUsersResult,
    AddUsersSession,
    AudienceUsersPayload,
    BatchResult,
    Params,
    Result,
    Token,
    User,
)
from .session import GraphSession
logger = logging.getLogger("facebook.client")
class FacebookGraphClient:
    def __init__(
        self,
        config: FacebookConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        oauth2: Optional[FacebookOAuth2] = None,
        session: Optional[GraphSession] = None,
    ):
        self.config = config
        self.http_client = http_client
        self.oauth2 = oauth2 or FacebookOAuth2(config)
        self._session = session
    @property
    def version(self) -> str:
        return self.config.version
    @property
    def session(self) -> Optional[GraphSession]:
        return self._session
    @property
    def is_authenticated(self) -> bool:
        return self._session is not None and bool(self._session.access_token)
    def auth(self, token: Union[Token, str], scopes: Optional[List[str]] = None) -> "FacebookGraphClient":
        access_token = token.access_token if isinstance(token, Token) else token
        if not access_token:
            raise FacebookAuthError("Facebook access token is empty")
        oauth2 = self.oauth2.with_scopes(*scopes) if scopes is not None else self.oauth2
        session = GraphSession(
            access_token=access_token,
            version=self.config.version,
            app_secret=self.config.oauth2.client_secret,
            enable_appsecret_proof=self.config.enable_appsecret_proof,
            timeout=self.config.timeout,
            http_client=self.http_client,
        )
        return FacebookGraphClient(oauth2.config, http_client=self.http_client, oauth2=oauth2, session=session)
    def ensure_session(self) -> GraphSession:
        if not self.is_authenticated:
            raise FacebookAuthError("Facebook client is not authorized, call auth() with a token first")
        return self._session
    async def get(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.ensure_session().get(path, params)
    async def post(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.ensure_session().post(path, params)
    async def delete(self, path: str, params: Optional[Params] = None) -> Result:
        return await self.ensure_session().delete(path, params)
    async def batch(self, batch_params: Optional[Params], *requests: Params) -> List[BatchResult]:
        return await self.ensure_session().batch(batch_params, *requests)
    # OAuth2
    @property
    def client_id(self) -> str:
        return self.oauth2.client_id
    @property
    def client_secret(self) -> str:
        return self.oauth2.client_secret
    @property
    def oauth2_config(self) -> FacebookConfig:
        return self.oauth2.config
    def auth_code_url(self, state: str, **kwargs: Any) -> str:
        return self.oauth2.auth_code_url(state, **kwargs)
    async def exchange_oauth2_code(self, code: str) -> Token:
        return await self.oauth2.exchange_code(code)
    async def access_token(self, refresh_token: str) -> Token:
        return await self.oauth2.access_token(refresh_token)
    async def revoke(self, refresh_token: str) -> None:
        await self.oauth2.revoke(self.ensure_session(), refresh_token)
    # Audiences
    async def audience(self, audience_id: str, params: Optional[Params] = None) -> Result:
        return await operations.audience(self, audience_id, params)
    async def custom_audiences(self, ad_account_id: str, params: Optional[Params] = None) -> Result:
        return await operations.custom_audiences(self, ad_account_id, params)
    async def create_audience(self, ad_account_id: str, params: Optional[Params] = None) -> Result:
        return await operations.create_audience(self, ad_account_id, params)
    async def add_users(
        self,
        audience_id: str,
        payload: AudienceUsersPayload,
        params: Optional[Params] = None,
        session: Optional[AddUsersSession] = None,
    ) -> AddUsersResult:
        return await operations.add_users(self, audience_id, payload, params, session)
    async def replace_users(
        self,
        audience_id: str,
        payload: AudienceUsersPayload,
        params: Optional[Params] = None,
        session: Optional[AddUsersSession] = None,
    ) -> AddUsersResult:
        return await operations.replace_users(self, audience_id, payload, params, session)
    async def sessions(self, audience_id: str, session_id: str) -> Result:
        return await operations.sessions(self, audience_id, session_id)
    # Conversions
    async def dataset(self, dataset_id: str, params: Optional[Params] = None) -> Result:
        return await operations.dataset(self, dataset_id, params)
    async def datasets(self, ad_account_id: str, params: Optional[Params] = None) -> Result:
        return await operations.datasets(self, ad_account_id, params)
    async def upload_events(self, dataset_id: str, params: Optional[Params] = None) -> Result:
        return await operations.upload_events(self, dataset_id, params)
    # Me
    async def ad_accounts(self, params: Optional[Params] = None) -> Result:
        return await operations.ad_accounts(self, params)
    async def me(self, params: Optional[Params] = None) -> Result:
        return await operations.me(self, params)
    async def user(self) -> User:
        return await operations.user(self)
