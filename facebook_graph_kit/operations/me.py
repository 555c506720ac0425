"""
Facebook "me" Operations

Lookups on the user that owns the access token.
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from ..models import Params, Result, User
from ..utils import fields_params

if TYPE_CHECKING:
    from ..client import FacebookGraphClient

logger = logging.getLogger("facebook.operations.me")

USER_FIELDS = ("id", "email")


async def ad_accounts(
    client: "FacebookGraphClient",
    params: Optional[Params] = None,
) -> Result:
    return await client.get("me/adaccounts", params=params)


async def me(
    client: "FacebookGraphClient",
    params: Optional[Params] = None,
) -> Result:
    return await client.get("me", params=params)


async def user(client: "FacebookGraphClient") -> User:
    """Fetch id and email of the token owner."""
    result = await me(client, fields_params(*USER_FIELDS))
    return User.model_validate(result)
