"""SQLAlchemy model for notification preferences."""

from sqlalchemy import Boolean, Column, String, Uuid

from notifier.infrastructure.database import Base


class NotificationPreferenceModel(Base):
    """Database representation of a user's notification preference."""

    __tablename__ = "notification_preference"

    id = Column(Uuid, primary_key=True)
    user_id = Column(Uuid, nullable=False, unique=True, index=True)
    enabled = Column(Boolean, nullable=False, default=True)
    contact_info = Column(String(255), nullable=False, default="")


__all__ = ["NotificationPreferenceModel"]
