"""Application tracking database models."""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applybureau.models.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from applybureau.models.client import Client


class ApplicationStatus(str, Enum):
    """Status of a tracked job application."""

    APPLIED = "applied"
    UNDER_REVIEW = "under_review"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    INTERVIEW_COMPLETED = "interview_completed"
    SECOND_ROUND = "second_round"
    OFFER_RECEIVED = "offer_received"
    OFFER_ACCEPTED = "offer_accepted"
    OFFER_DECLINED = "offer_declined"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
    CLOSED = "closed"


class Application(UUIDPrimaryKeyMixin, Base):
    """Job application submitted by staff on behalf of a client."""

    __tablename__ = "applications"

    client_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), index=True
    )

    # Job details
    company_name: Mapped[str] = mapped_column(String(100))
    job_title: Mapped[str] = mapped_column(String(200))
    job_url: Mapped[str | None] = mapped_column(String(2048))
    job_description: Mapped[str | None] = mapped_column(Text)
    salary_range: Mapped[str | None] = mapped_column(String(100))
    location: Mapped[str | None] = mapped_column(String(200))
    job_type: Mapped[str | None] = mapped_column(String(50))  # full-time, part-time, contract, remote
    application_method: Mapped[str | None] = mapped_column(String(100))
    application_strategy: Mapped[str | None] = mapped_column(Text)

    # Status tracking; kept as a plain string so legacy rows still load
    status: Mapped[str] = mapped_column(String(50), default=ApplicationStatus.APPLIED.value, index=True)
    status_update_reason: Mapped[str | None] = mapped_column(Text)
    application_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Interview
    interview_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    interview_type: Mapped[str | None] = mapped_column(String(50))  # phone, video, in_person, panel
    interview_notes: Mapped[str | None] = mapped_column(Text)

    # Offer
    offer_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    offer_benefits: Mapped[str | None] = mapped_column(Text)
    offer_deadline: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Documents
    tailored_resume_url: Mapped[str | None] = mapped_column(String(2048))
    cover_letter_url: Mapped[str | None] = mapped_column(String(2048))

    # Notes
    notes: Mapped[str | None] = mapped_column(Text)  # client-visible
    admin_notes: Mapped[str | None] = mapped_column(Text)  # staff only

    # Relationships
    client: Mapped["Client"] = relationship(back_populates="applications")
