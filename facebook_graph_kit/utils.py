from __future__ import annotations
import hashlib
import hmac
import json
import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from facebook_graph_kit.exceptions import FacebookValidationError

logger = logging.getLogger("facebook.utils")

_MISSING = object()


def validate_ad_account_id(ad_account_id: str) -> str:
    if not ad_account_id:
        raise FacebookValidationError("ad_account_id", "is required")
    ad_account_id = str(ad_account_id).strip()
    if not ad_account_id:
        raise FacebookValidationError("ad_account_id", "cannot be empty")
    if not ad_account_id.startswith("act_"):
        return f"act_{ad_account_id}"
    return ad_account_id


def validate_object_id(name: str, object_id: str) -> str:
    if object_id is None:
        raise FacebookValidationError(name, "is required")
    object_id = str(object_id).strip().strip("/")
    if not object_id:
        raise FacebookValidationError(name, "is required")
    return object_id


def fields_params(*fields: str) -> Dict[str, str]:
    return {"fields": ",".join(fields)}


def encode_param(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(value, separators=(",", ":"), default=str)


def make_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """
    Flatten a Graph API param map into strings.

    Strings pass through, enums use their value, None values are dropped,
    anything else is JSON encoded so nested payloads survive a query string
    or a form body.
    """
    encoded: Dict[str, str] = {}
    for key, value in (params or {}).items():
        v = encode_param(value)
        if v is not None:
            encoded[str(key)] = v
    return encoded


def appsecret_proof(access_token: str, app_secret: str) -> str:
    return hmac.new(
        app_secret.encode("utf-8"),
        access_token.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def get_field(result: Dict[str, Any], path: str, default: Any = _MISSING) -> Any:
    """Look up a dotted path such as "operation_status.code" in a decoded result."""
    current: Any = result
    for part in path.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        elif default is _MISSING:
            raise KeyError(f"field {path!r} not found in result")
        else:
            return default
    return current
