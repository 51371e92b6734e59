"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .preference import NotificationPreferenceModel

__all__ = [
    "NotificationModel",
    "NotificationPreferenceModel",
]
