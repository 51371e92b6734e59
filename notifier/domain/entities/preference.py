"""Domain entity representing a user's notification preference."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Preference:
    """Whether a user accepts notifications and where to deliver them."""

    user_id: UUID
    enabled: bool = True
    contact_info: str = ""
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def default_for(cls, user_id: UUID) -> "Preference":
        """Return the preference assigned to users that never configured one."""

        return cls(user_id=user_id, enabled=True, contact_info="")

    def has_contact_info(self) -> bool:
        return bool(self.contact_info and self.contact_info.strip())


__all__ = ["Preference"]
