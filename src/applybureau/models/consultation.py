"""Consultation booking model."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from applybureau.models.base import Base, UUIDPrimaryKeyMixin


class ConsultationRequest(UUIDPrimaryKeyMixin, Base):
    """A consultation booked from the public site."""

    __tablename__ = "consultation_requests"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"), index=True
    )

    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), index=True)
    phone: Mapped[str | None] = mapped_column(String(20))
    reason: Mapped[str] = mapped_column(Text)
    preferred_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    preferred_time: Mapped[str] = mapped_column(String(5))  # HH:MM
    package_interest: Mapped[str] = mapped_column(String(50))  # drives the client's tier
    current_situation: Mapped[str | None] = mapped_column(Text)
    timeline: Mapped[str] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(50), default="pending")
