"""
Facebook Custom Audience Operations

Reading, creating and populating custom audiences. Uploaded user rows are
forwarded as given; hashing and normalization are up to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..exceptions import FacebookAudienceNotReadyError
from ..models import AddUsersResult, AddUsersSession, AudienceUsersPayload, Params, Result
from ..utils import fields_params, get_field, validate_ad_account_id, validate_object_id

if TYPE_CHECKING:
    from ..client import FacebookGraphClient

logger = logging.getLogger("facebook.operations.audiences")

AUDIENCE_READY_STATUS = 200


async def audience(
    client: "FacebookGraphClient",
    audience_id: str,
    params: Optional[Params] = None,
) -> Result:
    """GET /{audience_id}"""
    audience_id = validate_object_id("audience_id", audience_id)
    return await client.get(audience_id, params=params)


async def custom_audiences(
    client: "FacebookGraphClient",
    ad_account_id: str,
    params: Optional[Params] = None,
) -> Result:
    """GET /act_{ad_account_id}/customaudiences"""
    ad_account_id = validate_ad_account_id(ad_account_id)
    return await client.get(f"{ad_account_id}/customaudiences", params=params)


async def create_audience(
    client: "FacebookGraphClient",
    ad_account_id: str,
    params: Optional[Params] = None,
) -> Result:
    """
    Create a custom audience in an ad account.

    Args:
        client: Authenticated Graph client
        ad_account_id: Ad account ID (with or without act_ prefix)
        params: Audience fields, e.g. name, subtype (AudienceSubtype),
            customer_file_source (FileSource), description

    Returns:
        Decoded response, normally {"id": "<audience id>"}
    """
    ad_account_id = validate_ad_account_id(ad_account_id)
    result = await client.post(f"{ad_account_id}/customaudiences", params=params)
    logger.info(f"Custom audience created in {ad_account_id}: {result.get('id')}")
    return result


async def add_users(
    client: "FacebookGraphClient",
    audience_id: str,
    payload: AudienceUsersPayload,
    params: Optional[Params] = None,
    session: Optional[AddUsersSession] = None,
) -> AddUsersResult:
    """
    Add users to a custom audience.

    Args:
        client: Authenticated Graph client
        audience_id: Custom audience ID
        payload: Schema and user rows to upload
        params: Extra request params, left untouched
        session: Upload session when the rows are split over several requests

    Returns:
        Upload counters reported by the API
    """
    audience_id = validate_object_id("audience_id", audience_id)
    body = _users_params(payload, params, session)
    result = await client.post(f"{audience_id}/users", params=body)
    return AddUsersResult.model_validate(result)


async def replace_users(
    client: "FacebookGraphClient",
    audience_id: str,
    payload: AudienceUsersPayload,
    params: Optional[Params] = None,
    session: Optional[AddUsersSession] = None,
) -> AddUsersResult:
    """
    Replace all users of a custom audience.

    The audience must report operation_status 200 first; a replace started on
    an audience that is still processing is refused by the API.

    Raises:
        FacebookAudienceNotReadyError: If the audience is not in the ready state
    """
    audience_id = validate_object_id("audience_id", audience_id)
    status_result = await audience(client, audience_id, fields_params("operation_status"))
    status = _operation_status_code(status_result)
    if status != AUDIENCE_READY_STATUS:
        logger.info(f"Audience {audience_id} not ready for replace, operation_status={status}")
        raise FacebookAudienceNotReadyError(audience_id, status)

    body = _users_params(payload, params, session)
    result = await client.post(f"{audience_id}/usersreplace", params=body)
    return AddUsersResult.model_validate(result)


async def sessions(
    client: "FacebookGraphClient",
    audience_id: str,
    session_id: str,
) -> Result:
    """GET /{audience_id}/sessions for one upload session."""
    audience_id = validate_object_id("audience_id", audience_id)
    session_id = validate_object_id("session_id", session_id)
    return await client.get(f"{audience_id}/sessions", params={"session_id": session_id})


# =============================================================================
# Helper Functions
# =============================================================================

def _users_params(
    payload: AudienceUsersPayload,
    params: Optional[Params],
    session: Optional[AddUsersSession],
) -> Dict[str, Any]:
    body: Dict[str, Any] = dict(params or {})
    body["payload"] = payload.format()
    if session is not None:
        body["session"] = session.model_dump(exclude_none=True)
    return body


def _operation_status_code(result: Result) -> Optional[int]:
    status = get_field(result, "operation_status", None)
    if isinstance(status, dict):
        status = status.get("code")
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None
