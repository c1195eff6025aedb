"""Pydantic schemas for API validation.

Every mutating endpoint declares its accepted body here. Request schemas
derive from ``StrictSchema``: unknown fields are dropped and strings are
trimmed, so the validated model is the only thing handlers ever see.
"""

from applybureau.schemas.auth import (
    CompleteRegistrationRequest,
    InviteRequest,
    LoginRequest,
)
from applybureau.schemas.application import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationMutationResponse,
    ApplicationResponse,
    ApplicationStatsReport,
    ApplicationStatusUpdate,
    ApplicationUpdate,
    OverallStatsReport,
    StaffApplicationResponse,
    StatusBreakdown,
    WeeklyApplicationsResponse,
)
from applybureau.schemas.consultation import ConsultationBooking, ConsultationBookedResponse
from applybureau.schemas.errors import ErrorResponse, ValidationErrorDetail, ValidationErrorResponse
from applybureau.schemas.onboarding import (
    OnboardingQuestionnaire,
    OnboardingRecord,
    OnboardingStatusResponse,
    OnboardingSubmitResponse,
)

__all__ = [
    "CompleteRegistrationRequest",
    "InviteRequest",
    "LoginRequest",
    "ApplicationCreate",
    "ApplicationListResponse",
    "ApplicationMutationResponse",
    "ApplicationResponse",
    "ApplicationStatsReport",
    "ApplicationStatusUpdate",
    "ApplicationUpdate",
    "OverallStatsReport",
    "StaffApplicationResponse",
    "StatusBreakdown",
    "WeeklyApplicationsResponse",
    "ConsultationBooking",
    "ConsultationBookedResponse",
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "OnboardingQuestionnaire",
    "OnboardingRecord",
    "OnboardingStatusResponse",
    "OnboardingSubmitResponse",
]
