"""In-app notification model."""

import uuid

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from applybureau.models.base import Base, UUIDPrimaryKeyMixin


class Notification(UUIDPrimaryKeyMixin, Base):
    """Notification shown in a client or admin dashboard."""

    __tablename__ = "notifications"

    user_id: Mapped[uuid.UUID | None] = mapped_column(index=True)
    user_type: Mapped[str] = mapped_column(String(20))  # client, admin
    type: Mapped[str] = mapped_column(String(100))
    title: Mapped[str] = mapped_column(String(255))
    message: Mapped[str] = mapped_column(Text)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
