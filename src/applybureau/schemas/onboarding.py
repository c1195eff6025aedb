"""Onboarding questionnaire schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints

from applybureau.schemas.common import Rating, SalaryRange, ShortText, StrictSchema

CompanySize = Literal["startup", "small", "medium", "large", "enterprise"]
RemotePreference = Literal["remote", "hybrid", "onsite", "flexible"]
SearchTimeline = Literal["immediate", "1-3_months", "3-6_months", "6-12_months", "flexible"]
VolumePreference = Literal["quality_focused", "volume_focused", "balanced"]

Certification = Annotated[str, StringConstraints(min_length=2, max_length=200)]
ChallengeText = Annotated[str, StringConstraints(min_length=5, max_length=200)]
GoalText = Annotated[str, StringConstraints(min_length=10, max_length=1000)]


class OnboardingQuestionnaire(StrictSchema):
    """The 20-question onboarding questionnaire."""

    # Role targeting
    target_job_titles: list[ShortText] = Field(..., min_length=1, max_length=5)
    target_industries: list[ShortText] = Field(..., min_length=1, max_length=5)
    target_company_sizes: list[CompanySize] = Field(default_factory=list)
    target_locations: list[ShortText] = Field(..., min_length=1, max_length=10)
    remote_work_preference: RemotePreference = "hybrid"

    # Compensation guardrails
    current_salary_range: SalaryRange
    target_salary_range: SalaryRange
    salary_negotiation_comfort: Rating = 5

    # Experience and skills
    years_of_experience: int = Field(..., ge=0, le=50)
    key_technical_skills: list[ShortText] = Field(..., min_length=1, max_length=20)
    soft_skills_strengths: list[ShortText] = Field(default_factory=list, max_length=10)
    certifications_licenses: list[Certification] = Field(default_factory=list, max_length=10)

    # Job search strategy
    job_search_timeline: SearchTimeline = "3-6_months"
    application_volume_preference: VolumePreference = "quality_focused"
    networking_comfort_level: Rating = 5
    interview_confidence_level: Rating = 5

    # Career goals and challenges
    career_goals_short_term: GoalText
    career_goals_long_term: GoalText | None = None
    biggest_career_challenges: list[ChallengeText] = Field(..., min_length=1, max_length=5)
    support_areas_needed: list[ChallengeText] = Field(..., min_length=1, max_length=10)


class OnboardingSubmission(BaseModel):
    """Summary of a stored questionnaire returned after submission."""

    id: uuid.UUID
    execution_status: str
    completed_at: datetime | None
    requires_approval: bool = True

    model_config = {"from_attributes": True}


class OnboardingSubmitResponse(BaseModel):
    success: bool = True
    message: str
    data: OnboardingSubmission
    next_steps: str


class OnboardingRecord(BaseModel):
    """Client view of their stored questionnaire (no staff-only fields)."""

    id: uuid.UUID
    target_job_titles: list[str]
    target_industries: list[str]
    target_company_sizes: list[str]
    target_locations: list[str]
    remote_work_preference: str
    current_salary_range: str | None
    target_salary_range: str | None
    salary_negotiation_comfort: int
    years_of_experience: int
    key_technical_skills: list[str]
    soft_skills_strengths: list[str]
    certifications_licenses: list[str]
    job_search_timeline: str
    application_volume_preference: str
    networking_comfort_level: int
    interview_confidence_level: int
    career_goals_short_term: str
    career_goals_long_term: str | None
    biggest_career_challenges: list[str]
    support_areas_needed: list[str]
    execution_status: str
    completed_at: datetime | None
    approved_at: datetime | None

    model_config = {"from_attributes": True}


class OnboardingStatusDetail(BaseModel):
    id: uuid.UUID
    execution_status: str
    completed_at: datetime | None
    approved_at: datetime | None

    model_config = {"from_attributes": True}


class ProfileStatus(BaseModel):
    profile_unlocked: bool = False
    onboarding_submitted: bool = False
    onboarding_submitted_at: datetime | None = None

    model_config = {"from_attributes": True}


class OnboardingStatusResponse(BaseModel):
    """Where the client stands in the onboarding flow."""

    status: Literal["not_started", "pending_review", "approved", "rejected", "unknown"]
    onboarding: OnboardingStatusDetail | None
    profile: ProfileStatus
    can_access_tracker: bool
    next_steps: str


class OnboardingApprovalResponse(BaseModel):
    message: str
    data: OnboardingStatusDetail
