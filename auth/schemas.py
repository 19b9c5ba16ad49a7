"""Client token request schemas."""

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator


def _check_finite(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("metadata numbers must be finite")
    if isinstance(value, dict):
        for item in value.values():
            _check_finite(item)
    elif isinstance(value, list):
        for item in value:
            _check_finite(item)


class Status(str, enum.Enum):
    """State of a user or organization."""

    UNSPECIFIED = ""
    ACTIVE = "active"
    DELETED = "deleted"  # Authentication attempts are refused


class UserDetails(BaseModel):
    """
    Information about a user to sync to Cord.

    Fields left empty are not sent, except email which is required.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    email: str | None = None
    name: str | None = None
    profile_picture_url: str | None = None
    status: Status = Status.UNSPECIFIED
    metadata: dict[str, JsonValue] = Field(default_factory=dict)

    # Deprecated: accepted for compatibility, never sent
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("metadata")
    @classmethod
    def metadata_is_finite(cls, value: dict[str, JsonValue]) -> dict[str, JsonValue]:
        _check_finite(value)
        return value


class OrganizationDetails(BaseModel):
    """
    Information about an organization to sync to Cord.

    Fields left empty are not sent, except name which is required.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    status: Status = Status.UNSPECIFIED
    members: list[str] = Field(default_factory=list)


class ClientTokenRequest(BaseModel):
    """Data that can be supplied in a client auth token."""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None
    organization_id: str | None = None
    user_details: UserDetails | None = None
    organization_details: OrganizationDetails | None = None
