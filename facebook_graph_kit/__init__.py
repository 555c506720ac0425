"""
Facebook Graph API Client Kit

An asyncio client for the Facebook Graph API, providing:
- OAuth2 login URL, code exchange, refresh and revoke (via requests-oauthlib)
- A signed Graph session for arbitrary GET/POST/DELETE/PUT and batch calls
- Custom audience operations (create, list, add/replace users, upload sessions)
- Conversions API operations (datasets, event upload)
- Token owner lookups (me, ad accounts)

Usage:
    from facebook_graph_kit import FacebookConfig, FacebookGraphClient

    client = FacebookGraphClient(FacebookConfig.from_env())
    url = client.auth_code_url(state="xyz")
    token = await client.exchange_oauth2_code(code)

    fb = client.auth(token)
    user = await fb.user()
    audiences = await fb.custom_audiences("act_123456", fields_params("id", "name"))
"""

from __future__ import annotations

from .auth import FacebookOAuth2
from .client import FacebookGraphClient
from .config import FacebookConfig, OAuth2Config
from .exceptions import (
    FacebookError,
    FacebookAPIError,
    FacebookAuthError,
    FacebookValidationError,
    FacebookTimeoutError,
    FacebookRevokeError,
    FacebookAudienceNotReadyError,
)
from .models import (
    Result,
    Params,
    User,
    Token,
    AudienceSubtype,
    FileSource,
    AudienceUsersPayload,
    AddUsersSession,
    AddUsersResult,
    BatchResult,
)
from .session import GraphSession
from .utils import (
    fields_params,
    make_params,
    appsecret_proof,
    get_field,
    validate_ad_account_id,
)
from . import operations

__all__ = [
    # Client
    "FacebookGraphClient",
    "GraphSession",
    "FacebookOAuth2",
    # Config
    "FacebookConfig",
    "OAuth2Config",
    # Models
    "Result",
    "Params",
    "User",
    "Token",
    "AudienceSubtype",
    "FileSource",
    "AudienceUsersPayload",
    "AddUsersSession",
    "AddUsersResult",
    "BatchResult",
    # Exceptions
    "FacebookError",
    "FacebookAPIError",
    "FacebookAuthError",
    "FacebookValidationError",
    "FacebookTimeoutError",
    "FacebookRevokeError",
    "FacebookAudienceNotReadyError",
    # Utils
    "fields_params",
    "make_params",
    "appsecret_proof",
    "get_field",
    "validate_ad_account_id",
    # Operations module
    "operations",
]
