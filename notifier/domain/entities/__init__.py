"""Domain entities exposed by the application."""

from .greeting import Greeting
from .notification import Notification
from .preference import Preference

__all__ = [
    "Greeting",
    "Notification",
    "Preference",
]
