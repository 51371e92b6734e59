"""Errors raised by the notification core and its collaborators."""

from __future__ import annotations

from uuid import UUID


class NotifierError(Exception):
    """Base class for notification service errors."""


class EligibilityError(NotifierError):
    """The user's preference does not allow notifications to be sent."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with id {user_id} does not allow to receive notifications."
        )


class TransportFailure(NotifierError):
    """The mail transport did not accept a message."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(message)


__all__ = ["EligibilityError", "NotifierError", "TransportFailure"]
