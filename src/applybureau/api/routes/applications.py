"""Application tracking endpoints."""

import uuid
from typing import Annotated

import structlog
from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from applybureau.api.deps import CurrentUser, DbSession, StaffUser, TrackerUser
from applybureau.api.validation import (
    ApplicationStatusBody,
    CreateApplicationBody,
    UpdateApplicationBody,
)
from applybureau.config import get_settings
from applybureau.models.application import ApplicationStatus
from applybureau.schemas.application import (
    ApplicationListResponse,
    ApplicationMutationResponse,
    ApplicationStatsReport,
    ApplicationUpdate,
    OverallStatsReport,
    WeeklyApplicationsResponse,
)
from applybureau.services.application_service import ApplicationService

logger = structlog.get_logger()
settings = get_settings()

router = APIRouter()


def _failed(operation: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation}",
    )


@router.get("", response_model=ApplicationListResponse)
async def get_applications(
    db: DbSession,
    current_user: CurrentUser,
    status_filter: Annotated[ApplicationStatus | None, Query(alias="status")] = None,
    search: Annotated[str | None, Query(max_length=200)] = None,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """Get the caller's applications with their stats."""
    client_id = current_user.id
    app_service = ApplicationService(db)

    try:
        applications, stats = await app_service.list_applications(
            client_id,
            status=status_filter.value if status_filter else None,
            search=search.strip() if search else None,
            limit=limit,
            offset=offset,
        )
    except SQLAlchemyError as e:
        logger.error("get_applications_error", client_id=str(client_id), error=str(e))
        raise _failed("get applications")

    return {
        "applications": applications,
        "total": len(applications),
        "stats": stats,
    }


@router.get("/stats", response_model=ApplicationStatsReport | OverallStatsReport)
async def get_application_stats(current_user: TrackerUser, db: DbSession):
    """Get weekly progress and outcome rates; staff get the overview across clients."""
    client_id = current_user.id
    app_service = ApplicationService(db)

    try:
        if current_user.is_staff:
            return await app_service.get_overall_stats()
        return await app_service.get_stats(client_id)
    except SQLAlchemyError as e:
        logger.error("get_application_stats_error", client_id=str(client_id), error=str(e))
        raise _failed("get application statistics")


@router.get("/weekly", response_model=WeeklyApplicationsResponse)
async def get_weekly_applications(
    current_user: TrackerUser,
    db: DbSession,
    weeks_back: Annotated[int, Query(ge=1, le=52)] = 4,
):
    """Get applications grouped by calendar week."""
    client_id = current_user.id
    app_service = ApplicationService(db)

    try:
        weekly = await app_service.get_weekly_applications(client_id, weeks_back=weeks_back)
    except SQLAlchemyError as e:
        logger.error("get_weekly_applications_error", client_id=str(client_id), error=str(e))
        raise _failed("get weekly applications")

    return {"weekly_applications": weekly, "total_weeks": len(weekly)}


@router.post("", response_model=ApplicationMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    staff: StaffUser,
    db: DbSession,
    data: CreateApplicationBody,
):
    """Track a new application on behalf of a client."""
    staff_id = staff.id
    app_service = ApplicationService(db)

    try:
        application = await app_service.create_application(data, staff)
    except SQLAlchemyError as e:
        logger.error(
            "create_application_error",
            admin_id=str(staff_id),
            client_id=str(data.client_id),
            error=str(e),
        )
        raise _failed("create application")

    return {"message": "Application created successfully", "application": application}


@router.patch("/{application_id}", response_model=ApplicationMutationResponse)
async def update_application(
    application_id: uuid.UUID,
    staff: StaffUser,
    db: DbSession,
    data: UpdateApplicationBody,
):
    """Update status, dates or notes of an application."""
    staff_id = staff.id
    app_service = ApplicationService(db)

    try:
        application = await app_service.update_application(application_id, data, staff)
    except SQLAlchemyError as e:
        logger.error(
            "update_application_error",
            admin_id=str(staff_id),
            application_id=str(application_id),
            error=str(e),
        )
        raise _failed("update application")

    return {"message": "Application updated successfully", "application": application}


@router.patch("/{application_id}/status", response_model=ApplicationMutationResponse)
async def update_application_status(
    application_id: uuid.UUID,
    staff: StaffUser,
    db: DbSession,
    data: ApplicationStatusBody,
):
    """Change the status, with optional interview and offer details."""
    staff_id = staff.id
    app_service = ApplicationService(db)
    changes = ApplicationUpdate.model_validate(data.model_dump(exclude_unset=True))

    try:
        application = await app_service.update_application(application_id, changes, staff)
    except SQLAlchemyError as e:
        logger.error(
            "update_application_status_error",
            admin_id=str(staff_id),
            application_id=str(application_id),
            error=str(e),
        )
        raise _failed("update application status")

    return {"message": "Application status updated successfully", "application": application}
