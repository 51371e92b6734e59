"""Tests for the command-line notification sender."""

from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy.orm import sessionmaker

from notifier.infrastructure.repositories import NotificationRepository, PreferenceRepository
from notifier.domain.entities import Preference
from scripts import send_notification


@pytest.fixture()
def script_env(monkeypatch: pytest.MonkeyPatch, db_session, transport):
    bound = sessionmaker(bind=db_session.get_bind())
    monkeypatch.setattr(send_notification, "SessionLocal", bound)
    monkeypatch.setattr(send_notification, "initialize_database", lambda: None)
    monkeypatch.setattr(
        send_notification.SendGridMailTransport,
        "from_settings",
        classmethod(lambda cls, settings=None: transport),
    )
    return db_session


def test_main_sends_and_prints_notification(script_env, transport, capsys):
    user_id = uuid4()

    send_notification.main([str(user_id), "--subject", "Hi", "--body", "body"])

    output = capsys.readouterr().out
    assert "Notification stored:" in output
    assert len(transport.sent) == 1
    assert len(NotificationRepository(script_env).find_by_user_id(user_id)) == 1


def test_main_exits_for_disabled_user(script_env, transport):
    user_id = uuid4()
    PreferenceRepository(script_env).save(Preference(user_id=user_id, enabled=False))

    with pytest.raises(SystemExit, match="Notification rejected"):
        send_notification.main([str(user_id), "--subject", "Hi"])

    assert transport.sent == []
