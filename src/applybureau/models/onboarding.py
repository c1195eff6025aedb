"""Onboarding questionnaire model."""

import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applybureau.models.base import Base, JSONType, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from applybureau.models.client import Client


class ExecutionStatus(str, Enum):
    """Review state of a submitted questionnaire."""

    PENDING_APPROVAL = "pending_approval"
    ACTIVE = "active"
    REJECTED = "rejected"


class ClientOnboarding(UUIDPrimaryKeyMixin, Base):
    """One client's onboarding questionnaire answers."""

    __tablename__ = "client_onboarding"

    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), unique=True, index=True
    )

    # Role targeting
    target_job_titles: Mapped[list[str]] = mapped_column(JSONType, default=list)
    target_industries: Mapped[list[str]] = mapped_column(JSONType, default=list)
    target_company_sizes: Mapped[list[str]] = mapped_column(JSONType, default=list)
    target_locations: Mapped[list[str]] = mapped_column(JSONType, default=list)
    remote_work_preference: Mapped[str] = mapped_column(String(20), default="hybrid")

    # Compensation
    current_salary_range: Mapped[str | None] = mapped_column(String(50))
    target_salary_range: Mapped[str | None] = mapped_column(String(50))
    salary_negotiation_comfort: Mapped[int] = mapped_column(default=5)

    # Experience and skills
    years_of_experience: Mapped[int] = mapped_column(default=0)
    key_technical_skills: Mapped[list[str]] = mapped_column(JSONType, default=list)
    soft_skills_strengths: Mapped[list[str]] = mapped_column(JSONType, default=list)
    certifications_licenses: Mapped[list[str]] = mapped_column(JSONType, default=list)

    # Search strategy
    job_search_timeline: Mapped[str] = mapped_column(String(20), default="3-6_months")
    application_volume_preference: Mapped[str] = mapped_column(String(20), default="quality_focused")
    networking_comfort_level: Mapped[int] = mapped_column(default=5)
    interview_confidence_level: Mapped[int] = mapped_column(default=5)

    # Goals and challenges
    career_goals_short_term: Mapped[str] = mapped_column(Text)
    career_goals_long_term: Mapped[str | None] = mapped_column(Text)
    biggest_career_challenges: Mapped[list[str]] = mapped_column(JSONType, default=list)
    support_areas_needed: Mapped[list[str]] = mapped_column(JSONType, default=list)

    # Review
    execution_status: Mapped[str] = mapped_column(
        String(20), default=ExecutionStatus.PENDING_APPROVAL.value
    )
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    approved_by: Mapped[uuid.UUID | None] = mapped_column()
    admin_notes: Mapped[str | None] = mapped_column(Text)

    client: Mapped["Client"] = relationship(back_populates="onboarding")
