"""Use cases for reading and changing notification preferences."""

from __future__ import annotations

from uuid import UUID

from notifier.domain.entities import Preference
from notifier.domain.ports import PreferenceStore


class PreferenceResolver:
    """Resolve a user's preference, creating the default one on first access."""

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def upsert(
        self, user_id: UUID, *, enabled: bool, contact_info: str | None
    ) -> Preference:
        """Replace the user's preference fields or create the record."""

        contact_info = contact_info or ""
        preference = self._store.find_by_user_id(user_id)
        if preference is not None:
            preference.enabled = enabled
            preference.contact_info = contact_info
            return self._store.save(preference)

        return self._store.save(
            Preference(user_id=user_id, enabled=enabled, contact_info=contact_info)
        )

    def get_or_create(self, user_id: UUID) -> Preference:
        """Return the stored preference or persist and return the default."""

        preference = self._store.find_by_user_id(user_id)
        if preference is not None:
            return preference
        return self._store.save(Preference.default_for(user_id))

    def get(self, user_id: UUID) -> Preference:
        return self.get_or_create(user_id)

    def set_enabled(self, user_id: UUID, enabled: bool) -> Preference:
        """Toggle only the ``enabled`` flag of the user's preference."""

        preference = self.get_or_create(user_id)
        preference.enabled = enabled
        return self._store.save(preference)


__all__ = ["PreferenceResolver"]
