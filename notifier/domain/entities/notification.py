"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Notification:
    """Message recorded in a user's notification history.

    Only ``seen`` changes after the notification has been stored.
    """

    user_id: UUID
    subject: str
    body: str
    created_on: datetime
    seen: bool = False
    id: UUID = field(default_factory=uuid4)


__all__ = ["Notification"]
