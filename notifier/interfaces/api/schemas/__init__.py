from .notification import (
    MarkSeenResult,
    NotificationRead,
    NotificationSend,
    UnseenCountRead,
)
from .preference import PreferenceRead, PreferenceUpsert

__all__ = [
    "MarkSeenResult",
    "NotificationRead",
    "NotificationSend",
    "UnseenCountRead",
    "PreferenceRead",
    "PreferenceUpsert",
]
