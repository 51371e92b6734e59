"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .preference_repository import PreferenceRepository

__all__ = [
    "NotificationRepository",
    "PreferenceRepository",
]
