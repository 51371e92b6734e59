"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.orm import Session

from notifier.application.use_cases import (
    DispatchEngine,
    HistoryReader,
    PreferenceResolver,
)
from notifier.config import Settings, get_settings
from notifier.domain.ports import MailTransport
from notifier.infrastructure.database import get_db
from notifier.infrastructure.email import SendGridMailTransport
from notifier.infrastructure.repositories import (
    NotificationRepository,
    PreferenceRepository,
)


def get_mail_transport(settings: Settings = Depends(get_settings)) -> MailTransport:
    """Return the mail transport configured for this deployment."""

    return SendGridMailTransport.from_settings(settings)


def get_preference_resolver(db: Session = Depends(get_db)) -> PreferenceResolver:
    return PreferenceResolver(PreferenceRepository(db))


def get_dispatch_engine(
    db: Session = Depends(get_db),
    transport: MailTransport = Depends(get_mail_transport),
    settings: Settings = Depends(get_settings),
) -> DispatchEngine:
    """Build a request-scoped dispatch engine around the session."""

    return DispatchEngine(
        PreferenceResolver(PreferenceRepository(db)),
        NotificationRepository(db),
        transport,
        sender=settings.sendgrid_sender,
        skip_blank_contact=settings.notifier_skip_blank_contact,
    )


def get_history_reader(db: Session = Depends(get_db)) -> HistoryReader:
    return HistoryReader(NotificationRepository(db))
