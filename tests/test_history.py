"""Tests for the history reader."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from notifier.domain.entities import Notification

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _store_notification(store, user_id, *, minutes, seen=False, subject="Hi"):
    notification = Notification(
        user_id=user_id,
        subject=subject,
        body="body",
        created_on=BASE_TIME + timedelta(minutes=minutes),
        seen=seen,
    )
    return store.save(notification)


def test_history_returns_only_the_users_notifications_in_creation_order(
    history_reader, notification_store, user_id
):
    later = _store_notification(notification_store, user_id, minutes=5, subject="later")
    earlier = _store_notification(notification_store, user_id, minutes=1, subject="earlier")
    _store_notification(notification_store, uuid4(), minutes=2)

    history = history_reader.history(user_id)

    assert [n.id for n in history] == [earlier.id, later.id]


def test_unseen_and_unseen_count_ignore_seen_notifications(
    history_reader, notification_store, user_id
):
    _store_notification(notification_store, user_id, minutes=1, seen=True)
    unseen = _store_notification(notification_store, user_id, minutes=2)

    assert [n.id for n in history_reader.unseen(user_id)] == [unseen.id]
    assert history_reader.unseen_count(user_id) == 1


def test_mark_all_seen_marks_every_unseen_notification(
    history_reader, notification_store, user_id
):
    already_seen = _store_notification(notification_store, user_id, minutes=1, seen=True)
    first = _store_notification(notification_store, user_id, minutes=2)
    second = _store_notification(notification_store, user_id, minutes=3)

    marked = history_reader.mark_all_seen(user_id)

    assert {n.id for n in marked} == {first.id, second.id}
    assert all(n.seen for n in marked)
    assert history_reader.unseen(user_id) == []
    assert notification_store.records[already_seen.id].seen is True
    assert len(history_reader.history(user_id)) == 3


def test_mark_all_seen_leaves_other_users_untouched(
    history_reader, notification_store, user_id
):
    other_user = uuid4()
    _store_notification(notification_store, user_id, minutes=1)
    _store_notification(notification_store, other_user, minutes=2)

    history_reader.mark_all_seen(user_id)

    assert history_reader.unseen_count(other_user) == 1


def test_mark_all_seen_without_unseen_writes_empty_batch(
    history_reader, notification_store, user_id
):
    assert history_reader.mark_all_seen(user_id) == []
    assert notification_store.save_all_batches == [[]]
