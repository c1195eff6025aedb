"""Application tracking service."""

import uuid
from collections import Counter
from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import Select, or_, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.config import Settings, get_settings
from applybureau.database.errors import is_relation_missing
from applybureau.models.application import Application
from applybureau.models.client import Client
from applybureau.models.consultation import ConsultationRequest
from applybureau.schemas.application import (
    ApplicationCreate,
    ApplicationStatsReport,
    ApplicationUpdate,
    OverallStatsReport,
)
from applybureau.services.exceptions import NotFoundError
from applybureau.services.notification_service import NotificationService
from applybureau.services.stats import (
    applied_at,
    compute_overall_stats,
    compute_stats,
    default_stats,
    resolve_tier,
    week_start,
)

logger = structlog.get_logger()

# Columns that cannot be cleared through a partial update
NON_NULLABLE_UPDATES = ("status", "interview_date", "offer_amount")
URL_FIELDS = ("job_url", "tailored_resume_url", "cover_letter_url")


class ApplicationService:
    """List, create and update tracked applications and compute their stats."""

    def __init__(self, db: AsyncSession, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()
        self.notifications = NotificationService(db)

    async def _scalars(self, query: Select) -> list[Any] | None:
        """Run a query; None means the table has not been provisioned yet."""
        try:
            result = await self.db.execute(query)
        except DBAPIError as exc:
            if not is_relation_missing(exc):
                raise
            await self.db.rollback()
            logger.warning("relation_missing", error=str(exc.orig))
            return None
        return list(result.scalars().all())

    async def list_applications(
        self,
        client_id: uuid.UUID,
        status: str | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Application], ApplicationStatsReport]:
        """Get a page of a client's applications, newest first, with stats."""
        query = select(Application).where(Application.client_id == client_id)

        if status:
            query = query.where(Application.status == status)

        if search:
            query = query.where(
                or_(
                    Application.company_name.icontains(search, autoescape=True),
                    Application.job_title.icontains(search, autoescape=True),
                )
            )

        query = query.order_by(Application.created_at.desc()).offset(offset).limit(limit)

        applications = await self._scalars(query)
        if applications is None:
            return [], default_stats()

        stats = await self.get_stats(client_id)
        return applications, stats

    async def get_client_tier(self, client_id: uuid.UUID) -> str:
        """Tier from the client's most recent consultation request."""
        rows = await self._scalars(
            select(ConsultationRequest.package_interest)
            .where(ConsultationRequest.user_id == client_id)
            .order_by(ConsultationRequest.created_at.desc())
            .limit(1)
        )
        return resolve_tier(rows[0] if rows else None)

    async def get_stats(
        self,
        client_id: uuid.UUID,
        now: datetime | None = None,
    ) -> ApplicationStatsReport:
        """Compute the stats report for one client."""
        tier = await self.get_client_tier(client_id)

        applications = await self._scalars(
            select(Application).where(Application.client_id == client_id)
        )
        if applications is None:
            return default_stats(tier)

        return compute_stats(
            applications,
            tier=tier,
            now=now,
            progress_cap=self.settings.weekly_progress_cap,
        )

    async def get_overall_stats(self) -> OverallStatsReport:
        """Overview across every client, for staff."""
        applications = await self._scalars(select(Application))
        if applications is None:
            return OverallStatsReport()
        return compute_overall_stats(applications)

    async def get_weekly_applications(
        self,
        client_id: uuid.UUID,
        weeks_back: int = 4,
        now: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """Group a client's applications by calendar week (newest week first)."""
        applications = await self._scalars(
            select(Application)
            .where(Application.client_id == client_id)
            .order_by(Application.application_date.desc(), Application.created_at.desc())
        )
        if not applications:
            return []

        tz = (now or datetime.now().astimezone()).tzinfo
        groups: dict[datetime, dict[str, Any]] = {}

        for application in applications:
            moment = applied_at(application) or datetime.now(timezone.utc)
            start = week_start(moment.astimezone(tz))
            group = groups.setdefault(
                start,
                {"week_start": start, "applications": [], "status_counts": Counter()},
            )
            group["applications"].append(application)
            group["status_counts"][application.status or "applied"] += 1

        weekly = sorted(groups.values(), key=lambda g: g["week_start"], reverse=True)[:weeks_back]
        for group in weekly:
            group["total_count"] = len(group["applications"])
            group["status_counts"] = dict(group["status_counts"])
        return weekly

    async def get_application(self, application_id: uuid.UUID) -> Application:
        application = await self.db.get(Application, application_id)
        if not application:
            raise NotFoundError("Application not found")
        return application

    async def create_application(self, data: ApplicationCreate, staff: Client) -> Application:
        """Create an application on behalf of a client and notify them."""
        client = await self.db.get(Client, data.client_id)
        if not client:
            raise NotFoundError("Client not found")

        values = data.model_dump()
        for field in URL_FIELDS:
            values[field] = values.get(field) or None
        if not values.get("application_date"):
            values["application_date"] = datetime.now(timezone.utc)
        if not values.get("admin_notes"):
            values["admin_notes"] = f"Created by admin: {staff.email or staff.id}"

        application = Application(**values)
        self.db.add(application)
        await self.db.flush()
        await self.db.refresh(application)

        await self.notifications.notify_client(
            client.id,
            type="application_added",
            title="New Application Added",
            message=(
                f"Application for {application.job_title} at {application.company_name} "
                "has been added to your tracker"
            ),
        )

        logger.info(
            "application_created",
            application_id=str(application.id),
            client_id=str(client.id),
            admin_id=str(staff.id),
        )
        return application

    async def update_application(
        self,
        application_id: uuid.UUID,
        data: ApplicationUpdate,
        staff: Client,
    ) -> Application:
        """Apply a partial update; notify the client when the status changes."""
        application = await self.get_application(application_id)

        changes = data.model_dump(exclude_unset=True)
        for field in NON_NULLABLE_UPDATES:
            if changes.get(field) is None:
                changes.pop(field, None)

        previous_status = application.status
        for field, value in changes.items():
            setattr(application, field, value)

        await self.db.flush()
        await self.db.refresh(application)

        new_status = changes.get("status")
        if new_status and new_status != previous_status:
            await self.notifications.notify_client(
                application.client_id,
                type="application_status_update",
                title="Application Status Updated",
                message=(
                    f"Your application for {application.job_title} at "
                    f"{application.company_name} is now {new_status.replace('_', ' ')}"
                ),
            )

        logger.info(
            "application_updated",
            application_id=str(application.id),
            status=application.status,
            previous_status=previous_status,
            fields=sorted(changes),
            updated_by=str(staff.id),
        )
        return application

