"""Persistence layer for notification preferences."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from notifier.domain.entities import Preference
from notifier.infrastructure.models import NotificationPreferenceModel


class PreferenceRepository:
    """Store one :class:`Preference` per user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_user_id(self, user_id: UUID) -> Preference | None:
        model = (
            self.session.query(NotificationPreferenceModel)
            .filter(NotificationPreferenceModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def save(self, preference: Preference) -> Preference:
        model = self.session.get(NotificationPreferenceModel, preference.id)
        if model is None:
            model = NotificationPreferenceModel(id=preference.id)
        self._apply_entity_to_model(model, preference)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationPreferenceModel, preference: Preference
    ) -> None:
        model.user_id = preference.user_id
        model.enabled = preference.enabled
        model.contact_info = preference.contact_info or ""

    @staticmethod
    def _to_entity(model: NotificationPreferenceModel) -> Preference:
        return Preference(
            id=model.id,
            user_id=model.user_id,
            enabled=model.enabled,
            contact_info=model.contact_info or "",
        )


__all__ = ["PreferenceRepository"]
