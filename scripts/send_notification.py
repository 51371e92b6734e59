"""Utility script to send a single notification from the command line."""

from __future__ import annotations

import argparse
import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from notifier.application.use_cases import DispatchEngine, PreferenceResolver
from notifier.config import get_settings
from notifier.domain.errors import EligibilityError
from notifier.infrastructure.database import SessionLocal, initialize_database
from notifier.infrastructure.email import SendGridMailTransport
from notifier.infrastructure.repositories import (
    NotificationRepository,
    PreferenceRepository,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the notification to send."""

    parser = argparse.ArgumentParser(
        description="Send a notification to a user and store it in their history.",
    )
    parser.add_argument("user_id", type=UUID, help="Identifier of the target user")
    parser.add_argument("--subject", required=True, help="Notification subject")
    parser.add_argument("--body", default="", help="Notification body (default: empty)")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log delivery details to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Send a notification using the provided command line arguments."""

    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    initialize_database()
    settings = get_settings()

    session = SessionLocal()
    try:
        engine = DispatchEngine(
            PreferenceResolver(PreferenceRepository(session)),
            NotificationRepository(session),
            SendGridMailTransport.from_settings(settings),
            sender=settings.sendgrid_sender,
            skip_blank_contact=settings.notifier_skip_blank_contact,
        )
        notification = engine.send(args.user_id, args.subject, args.body)
    except EligibilityError as exc:
        raise SystemExit(f"Notification rejected: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the notification to the database: {exc}") from exc
    else:
        print(
            "Notification stored:\n"
            f"  ID: {notification.id}\n"
            f"  User: {notification.user_id}\n"
            f"  Subject: {notification.subject}\n"
            f"  Created on: {notification.created_on.isoformat()}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
