"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    from_utc_naive_datetime,
    get_app_timezone,
    now_in_app_timezone,
    to_utc_naive_datetime,
)

__all__ = [
    "ensure_app_timezone",
    "from_utc_naive_datetime",
    "get_app_timezone",
    "now_in_app_timezone",
    "to_utc_naive_datetime",
]
