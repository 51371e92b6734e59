"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationSend(BaseModel):
    """Payload used to send a notification to a user."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="userId")
    subject: str = Field(..., min_length=1, max_length=255)
    body: str


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    user_id: UUID = Field(..., alias="userId")
    subject: str
    body: str
    created_on: datetime = Field(..., alias="createdOn")
    seen: bool = False


class UnseenCountRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="userId")
    count: int


class MarkSeenResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="userId")
    marked: int


__all__ = ["MarkSeenResult", "NotificationRead", "NotificationSend", "UnseenCountRead"]
