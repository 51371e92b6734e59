"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable
from uuid import UUID

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification
from notifier.infrastructure.models import NotificationModel
from notifier.utils import (
    from_utc_naive_datetime,
    now_in_app_timezone,
    to_utc_naive_datetime,
)


class NotificationRepository:
    """Append-only storage for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_on.asc(), NotificationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def find_unseen_by_user_id(self, user_id: UUID) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.seen.is_(False))
            .order_by(NotificationModel.created_on.asc(), NotificationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def save(self, notification: Notification) -> Notification:
        model = self._stage(notification)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def save_all(self, notifications: Iterable[Notification]) -> None:
        for notification in notifications:
            self._stage(notification)
        self.session.commit()

    def _stage(self, notification: Notification) -> NotificationModel:
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            model = NotificationModel(id=notification.id)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        return model

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.user_id = notification.user_id
        model.subject = notification.subject
        model.body = notification.body
        model.created_on = (
            to_utc_naive_datetime(notification.created_on)
            or to_utc_naive_datetime(now_in_app_timezone())
        )
        model.seen = notification.seen

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            subject=model.subject,
            body=model.body,
            created_on=from_utc_naive_datetime(model.created_on),
            seen=bool(model.seen),
        )


__all__ = ["NotificationRepository"]
