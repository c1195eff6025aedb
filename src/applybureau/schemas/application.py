"""Application tracking schemas."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, Field, StringConstraints

from applybureau.models.application import ApplicationStatus
from applybureau.schemas.common import StrictSchema, UrlOrEmpty

JobType = Literal["full-time", "part-time", "contract", "remote"]
InterviewType = Literal["phone", "video", "in_person", "panel"]

# Fits the Numeric(12, 2) column; JSON inf/nan and sub-cent values are rejected
OfferAmount = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2, allow_inf_nan=False)]


def _text(max_length: int, min_length: int = 0):
    return Annotated[str, StringConstraints(min_length=min_length, max_length=max_length)]


class ApplicationCreate(StrictSchema):
    """Staff request to track a new application for a client."""

    client_id: uuid.UUID
    job_title: _text(200, 2)
    company_name: _text(100, 2) = Field(
        ..., validation_alias=AliasChoices("company_name", "company")
    )
    job_description: _text(5000) | None = None
    job_url: UrlOrEmpty | None = None
    salary_range: _text(100) | None = None
    location: _text(200) | None = None
    job_type: JobType | None = None
    application_method: _text(100) | None = None
    application_strategy: _text(1000) | None = None
    admin_notes: _text(1000) | None = None

    application_date: datetime | None = None
    status: ApplicationStatus = ApplicationStatus.APPLIED.value
    tailored_resume_url: UrlOrEmpty | None = None
    cover_letter_url: UrlOrEmpty | None = None
    notes: _text(5000) | None = None


class ApplicationStatusUpdate(StrictSchema):
    """Status change with optional interview and offer details."""

    status: ApplicationStatus
    status_update_reason: _text(500) | None = None
    interview_scheduled_at: datetime | None = None
    interview_type: InterviewType | None = None
    interview_notes: _text(1000) | None = None
    offer_salary: OfferAmount | None = None
    offer_benefits: _text(1000) | None = None
    offer_deadline: datetime | None = None


class ApplicationUpdate(StrictSchema):
    """Partial update; only fields present in the body are applied."""

    status: ApplicationStatus | None = None
    status_update_reason: _text(500) | None = None
    interview_date: datetime | None = Field(
        None, validation_alias=AliasChoices("interview_date", "interview_scheduled_at")
    )
    interview_type: InterviewType | None = None
    interview_notes: _text(1000) | None = None
    offer_amount: OfferAmount | None = Field(
        None, validation_alias=AliasChoices("offer_amount", "offer_salary")
    )
    offer_benefits: _text(1000) | None = None
    offer_deadline: datetime | None = None
    notes: _text(5000) | None = None
    admin_notes: _text(1000) | None = None


class ApplicationResponse(BaseModel):
    """Client-facing view of an application."""

    id: uuid.UUID
    client_id: uuid.UUID
    company_name: str
    job_title: str
    job_url: str | None
    job_description: str | None
    salary_range: str | None
    location: str | None
    job_type: str | None
    status: str
    application_date: datetime | None
    interview_date: datetime | None
    interview_type: str | None
    offer_amount: float | None
    offer_deadline: datetime | None
    tailored_resume_url: str | None
    cover_letter_url: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StaffApplicationResponse(ApplicationResponse):
    """Staff view, including internal notes."""

    application_method: str | None
    application_strategy: str | None
    status_update_reason: str | None
    interview_notes: str | None
    offer_benefits: str | None
    admin_notes: str | None


class StatusBreakdown(BaseModel):
    applied: int = 0
    interviewing: int = 0
    offer: int = 0
    rejected: int = 0
    withdrawn: int = 0


class ApplicationStatsReport(BaseModel):
    """Weekly target progress and outcome rates for one client."""

    tier: str = "Tier 1"
    weekly_target: int = 17
    total_applications: int = 0
    applications_this_week: int = 0
    weekly_progress: int = 0
    status_breakdown: StatusBreakdown = Field(default_factory=StatusBreakdown)
    response_rate: int = 0
    offer_rate: int = 0

    # Keeps the stats endpoint's client and staff reports distinguishable
    model_config = {"extra": "forbid"}


class OverallStatsReport(BaseModel):
    """Staff overview across every client's applications."""

    user_type: Literal["admin"] = "admin"
    total_applications: int = 0
    total_clients: int = 0
    status_breakdown: StatusBreakdown = Field(default_factory=StatusBreakdown)
    overall_response_rate: int = 0
    overall_offer_rate: int = 0

    model_config = {"extra": "forbid"}


class ApplicationListResponse(BaseModel):
    applications: list[ApplicationResponse]
    total: int
    stats: ApplicationStatsReport


class ApplicationMutationResponse(BaseModel):
    message: str
    application: StaffApplicationResponse


class WeeklyApplicationGroup(BaseModel):
    week_start: datetime
    applications: list[ApplicationResponse]
    total_count: int
    status_counts: dict[str, int]


class WeeklyApplicationsResponse(BaseModel):
    weekly_applications: list[WeeklyApplicationGroup]
    total_weeks: int
