"""Pydantic models for IMS API sessions and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator


class Session(BaseModel):
    """Immutable authentication state used to sign requests."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(default="", repr=False)

    @property
    def authenticated(self) -> bool:
        """A session is authenticated exactly when it carries a token."""
        return bool(self.token)


class AuthenticationResult(BaseModel):
    """Decoded body of the login endpoint."""

    model_config = ConfigDict(frozen=True)

    key: str = ""
    non_field_errors: list[str] = Field(default_factory=list)

    @field_validator("key", mode="before")
    @classmethod
    def _null_key(cls, value):
        return "" if value is None else value

    @field_validator("non_field_errors", mode="before")
    @classmethod
    def _null_errors(cls, value):
        return [] if value is None else value

    @property
    def succeeded(self) -> bool:
        return bool(self.key)


class Asset(BaseModel):
    """
    One inventory record returned by the assets endpoint.

    type_id, primary_ip_device_id and site_id are foreign keys the API may send
    as null or leave out. They decode to None rather than 0, so an unset key
    cannot be confused with id 0.
    """

    id: int
    name: str
    is_deleted: bool = False
    last_updated: datetime
    note: str = ""  # null in the payload
    json_data: JsonValue = None  # opaque, never interpreted
    type_id: Optional[int] = None
    primary_ip_device_id: Optional[int] = None
    site_id: Optional[int] = None
    tags: list[int] = Field(default_factory=list)

    @field_validator("note", mode="before")
    @classmethod
    def _null_note(cls, value):
        return "" if value is None else value
