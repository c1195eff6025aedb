"""Onboarding questionnaire endpoints."""

import uuid

import structlog
from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from applybureau.api.deps import ClientUser, DbSession, StaffUser
from applybureau.api.validation import OnboardingBody
from applybureau.schemas.onboarding import (
    OnboardingApprovalResponse,
    OnboardingRecord,
    OnboardingStatusResponse,
    OnboardingSubmitResponse,
)
from applybureau.services.onboarding_service import OnboardingService

logger = structlog.get_logger()

router = APIRouter()


@router.post("", response_model=OnboardingSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_onboarding(
    current_user: ClientUser,
    db: DbSession,
    data: OnboardingBody,
):
    """Submit the onboarding questionnaire for staff review."""
    user_id = current_user.id
    onboarding_service = OnboardingService(db)

    try:
        onboarding = await onboarding_service.submit(current_user, data)
    except SQLAlchemyError as e:
        logger.error("onboarding_submission_error", user_id=str(user_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save onboarding data",
        )

    return {
        "message": "Onboarding submitted successfully! Our team will review your information.",
        "data": onboarding,
        "next_steps": (
            "Your profile is under review. You will be notified once approved "
            "and your Application Tracker will be unlocked."
        ),
    }


@router.get("/status", response_model=OnboardingStatusResponse)
async def get_onboarding_status(db: DbSession, current_user: ClientUser):
    """Get the caller's onboarding and tracker access status."""
    return await OnboardingService(db).get_status(current_user)


@router.get("/questionnaire", response_model=OnboardingRecord)
async def get_questionnaire(db: DbSession, current_user: ClientUser):
    """Get the caller's stored questionnaire answers."""
    onboarding = await OnboardingService(db).get_for_client(current_user.id)
    if not onboarding:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No onboarding questionnaire found",
        )
    return onboarding


@router.post("/{onboarding_id}/approve", response_model=OnboardingApprovalResponse)
async def approve_onboarding(
    onboarding_id: uuid.UUID,
    db: DbSession,
    staff: StaffUser,
):
    """Approve a submitted questionnaire and unlock the client's tracker."""
    onboarding = await OnboardingService(db).approve(onboarding_id, staff)
    return {"message": "Onboarding approved", "data": onboarding}
