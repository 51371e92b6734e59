"""Use case for sending a notification to a user."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from notifier.domain.entities import Notification, Preference
from notifier.domain.errors import EligibilityError
from notifier.domain.ports import MailTransport, NotificationStore
from notifier.utils import now_in_app_timezone

from .preferences import PreferenceResolver

logger = logging.getLogger(__name__)


class DispatchEngine:
    """Send notifications with best-effort email delivery.

    A notification is stored for every eligible ``send`` call whether or not
    the mail transport accepts the email. The only error reported to the
    caller is :class:`EligibilityError`.
    """

    def __init__(
        self,
        resolver: PreferenceResolver,
        store: NotificationStore,
        transport: MailTransport,
        *,
        sender: str | None = None,
        skip_blank_contact: bool = False,
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        self._resolver = resolver
        self._store = store
        self._transport = transport
        self._sender = sender
        self._skip_blank_contact = skip_blank_contact
        self._clock = clock

    def send(self, user_id: UUID, subject: str, body: str) -> Notification:
        preference = self._resolver.get_or_create(user_id)
        if not preference.enabled:
            logger.info("Rejected notification for user %s: notifications disabled", user_id)
            raise EligibilityError(user_id)

        delivered = self._deliver(preference, subject, body)

        notification = Notification(
            user_id=user_id,
            subject=subject,
            body=body,
            created_on=self._clock(),
            seen=False,
        )
        saved = self._store.save(notification)
        logger.debug(
            "Stored notification %s for user %s (email delivered: %s)",
            saved.id,
            user_id,
            delivered,
        )
        return saved

    def _deliver(self, preference: Preference, subject: str, body: str) -> bool:
        """Attempt delivery and report whether the transport accepted it."""

        recipient = preference.contact_info or ""
        if self._skip_blank_contact and not preference.has_contact_info():
            logger.info(
                "Skipping email for user %s: no contact info", preference.user_id
            )
            return False

        try:
            self._transport.send(recipient, subject, body, sender=self._sender)
        except Exception as exc:
            logger.warning("Failed to send email to [%s]: %s", recipient, exc)
            return False

        logger.info("Email sent to [%s]", recipient)
        return True


__all__ = ["DispatchEngine"]
