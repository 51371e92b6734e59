"""Shared fixtures and in-memory collaborators for the test-suite."""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from collections.abc import Iterable, Sequence
from copy import deepcopy
from uuid import UUID, uuid4

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notifier.application.use_cases import (
    DispatchEngine,
    HistoryReader,
    PreferenceResolver,
)
from notifier.domain.entities import Notification, Preference
from notifier.domain.errors import TransportFailure


class InMemoryPreferenceStore:
    """Preference store that keeps copies, like a real database would."""

    def __init__(self) -> None:
        self.records: dict[UUID, Preference] = {}
        self.save_calls = 0

    def find_by_user_id(self, user_id: UUID) -> Preference | None:
        for preference in self.records.values():
            if preference.user_id == user_id:
                return deepcopy(preference)
        return None

    def save(self, preference: Preference) -> Preference:
        self.save_calls += 1
        self.records[preference.id] = deepcopy(preference)
        return deepcopy(preference)


class InMemoryNotificationStore:
    def __init__(self) -> None:
        self.records: dict[UUID, Notification] = {}
        self.save_all_batches: list[list[Notification]] = []

    def find_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        return [
            deepcopy(n)
            for n in sorted(self.records.values(), key=lambda n: n.created_on)
            if n.user_id == user_id
        ]

    def find_unseen_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        return [n for n in self.find_by_user_id(user_id) if not n.seen]

    def save(self, notification: Notification) -> Notification:
        self.records[notification.id] = deepcopy(notification)
        return deepcopy(notification)

    def save_all(self, notifications: Iterable[Notification]) -> None:
        batch = list(notifications)
        self.save_all_batches.append(batch)
        for notification in batch:
            self.records[notification.id] = deepcopy(notification)


class RecordingTransport:
    """Mail transport that records every message it accepts."""

    def __init__(self) -> None:
        self.sent: list[dict[str, str | None]] = []

    def send(self, to: str, subject: str, body: str, *, sender: str | None = None) -> None:
        self.sent.append({"to": to, "subject": subject, "body": body, "sender": sender})


class FailingTransport(RecordingTransport):
    """Mail transport that records the attempt and then fails."""

    def __init__(self, exc: Exception | None = None) -> None:
        super().__init__()
        self.exc = exc or TransportFailure("SendGrid API responded with status 500")

    def send(self, to: str, subject: str, body: str, *, sender: str | None = None) -> None:
        super().send(to, subject, body, sender=sender)
        raise self.exc


@pytest.fixture()
def user_id() -> UUID:
    return uuid4()


@pytest.fixture()
def preference_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture()
def notification_store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore()


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def resolver(preference_store: InMemoryPreferenceStore) -> PreferenceResolver:
    return PreferenceResolver(preference_store)


@pytest.fixture()
def dispatch_engine(
    resolver: PreferenceResolver,
    notification_store: InMemoryNotificationStore,
    transport: RecordingTransport,
) -> DispatchEngine:
    return DispatchEngine(
        resolver, notification_store, transport, sender="noreply@example.com"
    )


@pytest.fixture()
def history_reader(notification_store: InMemoryNotificationStore) -> HistoryReader:
    return HistoryReader(notification_store)


@pytest.fixture()
def db_session():
    """Yield a session bound to a fresh in-memory SQLite database."""

    from notifier.infrastructure.database import Base, initialize_database

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def make_failing_transport():
    """Return a factory for transports that fail with the given exception."""

    return FailingTransport
