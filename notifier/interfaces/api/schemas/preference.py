"""Pydantic models describing notification preference payloads."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PreferenceUpsert(BaseModel):
    """Payload used to create or replace a user's preference."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="userId")
    contact_info: str | None = Field(default=None, alias="contactInfo", max_length=255)
    notification_enabled: bool = Field(default=False, alias="notificationEnabled")


class PreferenceRead(BaseModel):
    """Representation of a preference returned to the client."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    user_id: UUID = Field(..., alias="userId")
    enabled: bool
    contact_info: str = Field(default="", alias="contactInfo")


__all__ = ["PreferenceRead", "PreferenceUpsert"]
