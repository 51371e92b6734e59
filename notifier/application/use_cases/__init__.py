"""Aggregate application use cases."""

from .dispatch import DispatchEngine
from .greeting import create_greeting
from .history import HistoryReader
from .preferences import PreferenceResolver

__all__ = [
    "DispatchEngine",
    "HistoryReader",
    "PreferenceResolver",
    "create_greeting",
]
