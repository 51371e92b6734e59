"""Collaborator contracts used by the notification core."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol
from uuid import UUID

from notifier.domain.entities import Notification, Preference


class PreferenceStore(Protocol):
    """Durable storage holding one preference per user."""

    def find_by_user_id(self, user_id: UUID) -> Preference | None:
        ...

    def save(self, preference: Preference) -> Preference:
        ...


class NotificationStore(Protocol):
    """Append-only notification storage queryable by user."""

    def find_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        ...

    def find_unseen_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        ...

    def save(self, notification: Notification) -> Notification:
        ...

    def save_all(self, notifications: Iterable[Notification]) -> None:
        ...


class MailTransport(Protocol):
    """Synchronous sender of single email messages.

    Implementations raise :class:`~notifier.domain.errors.TransportFailure`
    when the message is not accepted.
    """

    def send(
        self, to: str, subject: str, body: str, *, sender: str | None = None
    ) -> None:
        ...


__all__ = ["MailTransport", "NotificationStore", "PreferenceStore"]
