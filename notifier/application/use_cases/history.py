"""Read paths over a user's notification history."""

from __future__ import annotations

from uuid import UUID

from notifier.domain.entities import Notification
from notifier.domain.ports import NotificationStore


class HistoryReader:
    """Query stored notifications and mark them as seen."""

    def __init__(self, store: NotificationStore) -> None:
        self._store = store

    def history(self, user_id: UUID) -> list[Notification]:
        """Return every notification of the user, oldest first."""

        return list(self._store.find_by_user_id(user_id))

    def unseen(self, user_id: UUID) -> list[Notification]:
        return list(self._store.find_unseen_by_user_id(user_id))

    def unseen_count(self, user_id: UUID) -> int:
        return len(self.unseen(user_id))

    def mark_all_seen(self, user_id: UUID) -> list[Notification]:
        """Flag every currently unseen notification as seen.

        The batch is written even when empty. Returns the notifications that
        were marked.
        """

        unseen = self.unseen(user_id)
        for notification in unseen:
            notification.seen = True
        self._store.save_all(unseen)
        return unseen


__all__ = ["HistoryReader"]
