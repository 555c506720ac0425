from __future__ import annotations
import json
import time
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .exceptions import FacebookAPIError
Result = Dict[str, Any]
Params = Dict[str, Any]
class AudienceSubtype(str, Enum):
    CUSTOM = "CUSTOM"
class FileSource(str, Enum):
    USER_PROVIDED_ONLY = "USER_PROVIDED_ONLY"
    PARTNER_PROVIDED_ONLY = "PARTNER_PROVIDED_ONLY"
    BOTH_USERS_AND_PARTNERS_PROVIDED = "BOTH_USERS_AND_PARTNERS_PROVIDED"
class User(BaseModel):
    id: str
    email: str = ""
    model_config = ConfigDict(extra="allow")
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    refresh_token: Optional[str] = None
    expires_at: Optional[float] = None
    model_config = ConfigDict(extra="allow")
    @classmethod
    def from_oauthlib(cls, token: Dict[str, Any]) -> "Token":
        expires_at = token.get("expires_at")
        if expires_at is None and token.get("expires_in"):
            expires_at = time.time() + float(token["expires_in"])
        return cls(
            access_token=token.get("access_token", ""),
            token_type=token.get("token_type") or "bearer",
            refresh_token=token.get("refresh_token"),
            expires_at=expires_at,
        )
    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < time.time()
class AddUsersSession(BaseModel):
    session_id: str
    batch_seq: int = Field(default=1, ge=1)
    last_batch_flag: bool = False
    estimated_num_total: Optional[int] = None
class AudienceUsersPayload(BaseModel):
    schema_: List[str] = Field(alias="schema", min_length=1)
    data: List[Dict[str, Any]] = Field(default_factory=list)
    model_config = ConfigDict(populate_by_name=True)
    def format(self) -> Dict[str, Any]:
        """
        Build the payload body expected by the audience users endpoints.

        Every data entry becomes a row ordered like the schema, each value looked
        up by the lowercased schema key. Keys absent from an entry become None.
        """
        rows = []
        for entry in self.data:
            rows.append([entry.get(key.lower()) for key in self.schema_])
        return {"schema": list(self.schema_), "data": rows}
class AddUsersResult(BaseModel):
    audience_id: str = ""
    session_id: str = ""
    num_received: int = 0
    num_invalid_entries: int = 0
    invalid_entry_samples: Dict[str, Any] = Field(default_factory=dict)
    model_config = ConfigDict(extra="allow")
    @field_validator("session_id", "audience_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        if v is None:
            return ""
        return str(v)
    @field_validator("invalid_entry_samples", mode="before")
    @classmethod
    def coerce_samples(cls, v):
        # the API sends an empty list when there are no samples
        return v or {}
class BatchResult(BaseModel):
    code: int
    headers: List[Dict[str, Any]] = Field(default_factory=list)
    body: str = ""
    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, v):
        return v or []
    @field_validator("body", mode="before")
    @classmethod
    def coerce_body(cls, v):
        if v is None:
            return ""
        if isinstance(v, str):
            return v
        return json.dumps(v)
    @property
    def is_success(self) -> bool:
        return 200 <= self.code < 300
    @property
    def result(self) -> Result:
        if not self.body:
            return {}
        try:
            decoded = json.loads(self.body)
        except ValueError:
            raise FacebookAPIError(
                code=self.code,
                message=f"Invalid JSON in batch body: {self.body[:500]}",
                status_code=self.code,
            )
        if isinstance(decoded, dict):
            return decoded
        return {"data": decoded}
    def header(self, name: str) -> Optional[str]:
        for h in self.headers:
            if str(h.get("name", "")).lower() == name.lower():
                return h.get("value")
        return None
