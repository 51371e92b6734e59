"""Endpoints for notification preferences, dispatch and history."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from notifier.application.use_cases import (
    DispatchEngine,
    HistoryReader,
    PreferenceResolver,
    create_greeting,
)
from notifier.domain.entities import Notification, Preference
from notifier.domain.errors import EligibilityError
from notifier.interfaces.api.dependencies import (
    get_dispatch_engine,
    get_history_reader,
    get_preference_resolver,
)
from notifier.interfaces.api.schemas import (
    MarkSeenResult,
    NotificationRead,
    NotificationSend,
    PreferenceRead,
    PreferenceUpsert,
    UnseenCountRead,
)

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _preference_to_schema(preference: Preference) -> PreferenceRead:
    return PreferenceRead(
        id=preference.id,
        user_id=preference.user_id,
        enabled=preference.enabled,
        contact_info=preference.contact_info or "",
    )


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        subject=notification.subject,
        body=notification.body,
        created_on=notification.created_on,
        seen=notification.seen,
    )


@router.post(
    "/preferences", response_model=PreferenceRead, status_code=status.HTTP_201_CREATED
)
def upsert_notification_preference(
    payload: PreferenceUpsert,
    resolver: PreferenceResolver = Depends(get_preference_resolver),
):
    """Create or replace the notification preference of a user."""

    preference = resolver.upsert(
        payload.user_id,
        enabled=payload.notification_enabled,
        contact_info=payload.contact_info,
    )
    return _preference_to_schema(preference)


@router.get("/preferences", response_model=PreferenceRead)
def get_user_notification_preference(
    user_id: UUID = Query(..., alias="userId"),
    resolver: PreferenceResolver = Depends(get_preference_resolver),
):
    """Return the user's preference, creating the default one if missing."""

    return _preference_to_schema(resolver.get(user_id))


@router.put("/preferences", response_model=PreferenceRead)
def change_notification_preference(
    user_id: UUID = Query(..., alias="userId"),
    enabled: bool = Query(...),
    resolver: PreferenceResolver = Depends(get_preference_resolver),
):
    """Enable or disable notifications for a user."""

    return _preference_to_schema(resolver.set_enabled(user_id, enabled))


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def send_notification(
    payload: NotificationSend,
    engine: DispatchEngine = Depends(get_dispatch_engine),
):
    """Send a notification and record it in the user's history."""

    try:
        notification = engine.send(payload.user_id, payload.subject, payload.body)
    except EligibilityError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.get("/", response_model=list[NotificationRead])
def get_notification_history(
    user_id: UUID = Query(..., alias="userId"),
    reader: HistoryReader = Depends(get_history_reader),
):
    """Return every notification sent to the user."""

    return [_notification_to_schema(n) for n in reader.history(user_id)]


@router.get("/unseen", response_model=list[NotificationRead])
def get_unseen_notifications(
    user_id: UUID = Query(..., alias="userId"),
    reader: HistoryReader = Depends(get_history_reader),
):
    return [_notification_to_schema(n) for n in reader.unseen(user_id)]


@router.get("/unseen/count", response_model=UnseenCountRead)
def get_unseen_count(
    user_id: UUID = Query(..., alias="userId"),
    reader: HistoryReader = Depends(get_history_reader),
):
    return UnseenCountRead(user_id=user_id, count=reader.unseen_count(user_id))


@router.put("/seen", response_model=MarkSeenResult)
def mark_all_notifications_seen(
    user_id: UUID = Query(..., alias="userId"),
    reader: HistoryReader = Depends(get_history_reader),
):
    """Mark every unseen notification of the user as seen."""

    marked = reader.mark_all_seen(user_id)
    logger.debug("Marked %d notifications as seen for user %s", len(marked), user_id)
    return MarkSeenResult(user_id=user_id, marked=len(marked))


@router.get("/test")
def hello(name: str = "World") -> str:
    return create_greeting(name).message
