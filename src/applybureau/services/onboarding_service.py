"""Onboarding questionnaire workflow."""

import uuid
from datetime import datetime, timezone
from typing import Any

import httpx
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.config import Settings, get_settings
from applybureau.models.client import Client
from applybureau.models.onboarding import ClientOnboarding, ExecutionStatus
from applybureau.schemas.onboarding import OnboardingQuestionnaire
from applybureau.services.email_service import EmailService
from applybureau.services.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from applybureau.services.notification_service import NotificationService

logger = structlog.get_logger()

# execution_status -> (reported status, next steps)
STATUS_STEPS = {
    ExecutionStatus.PENDING_APPROVAL.value: (
        "pending_review",
        "Your onboarding is under review. You will be notified once approved.",
    ),
    ExecutionStatus.ACTIVE.value: (
        "approved",
        "Your onboarding is approved! You can now access the Application Tracker.",
    ),
    ExecutionStatus.REJECTED.value: (
        "rejected",
        "Your onboarding was not approved. Please contact support for assistance.",
    ),
}


class OnboardingService:
    """Submission, status and approval of the onboarding questionnaire."""

    def __init__(
        self,
        db: AsyncSession,
        email_service: EmailService | None = None,
        settings: Settings | None = None,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.email_service = email_service or EmailService(self.settings)
        self.notifications = NotificationService(db)

    async def get_for_client(self, client_id: uuid.UUID) -> ClientOnboarding | None:
        result = await self.db.execute(
            select(ClientOnboarding).where(ClientOnboarding.user_id == client_id)
        )
        return result.scalar_one_or_none()

    async def submit(self, client: Client, data: OnboardingQuestionnaire) -> ClientOnboarding:
        """Store (or replace) a questionnaire pending staff approval.

        Raises ConflictError if the client's onboarding is already active.
        """
        existing = await self.get_for_client(client.id)
        if existing and existing.execution_status == ExecutionStatus.ACTIVE.value:
            logger.warning(
                "duplicate_onboarding_attempt",
                user_id=str(client.id),
                existing_id=str(existing.id),
            )
            raise ConflictError(
                "Onboarding already completed and approved", code="ALREADY_COMPLETED"
            )

        now = datetime.now(timezone.utc)
        answers = data.model_dump()

        if existing:
            onboarding = existing
            for field, value in answers.items():
                setattr(onboarding, field, value)
        else:
            onboarding = ClientOnboarding(user_id=client.id, **answers)
            self.db.add(onboarding)

        onboarding.execution_status = ExecutionStatus.PENDING_APPROVAL.value
        onboarding.completed_at = now

        client.onboarding_submitted = True
        client.onboarding_submitted_at = now

        await self.db.flush()
        await self.db.refresh(onboarding)

        client_name = client.full_name or "Client"
        await self.notifications.notify_admins(
            type="onboarding_needs_approval",
            title="Onboarding Needs Approval",
            message=f"{client_name} ({client.email}) submitted the onboarding questionnaire",
        )
        await self._send_submission_emails(client, onboarding)

        logger.info(
            "onboarding_submitted",
            user_id=str(client.id),
            onboarding_id=str(onboarding.id),
        )
        return onboarding

    async def _send_submission_emails(self, client: Client, onboarding: ClientOnboarding) -> None:
        """Confirmation to the client and review request to staff; failures are logged only."""
        roles = ", ".join(onboarding.target_job_titles)
        messages = [
            (
                client.email,
                "Onboarding received",
                f"Hi {client.full_name or 'there'},\n\n"
                f"Thanks for completing your onboarding questionnaire (target roles: {roles}). "
                "Our team will review your answers within 24-48 hours and unlock your "
                "Application Tracker once approved.\n\n"
                f"Questions? Contact {self.settings.support_email}.",
            ),
            (
                self.settings.admin_email,
                "Onboarding review needed",
                f"{client.full_name or client.email} submitted their onboarding questionnaire.\n"
                f"Target roles: {roles}\n"
                f"Years of experience: {onboarding.years_of_experience}\n"
                f"Timeline: {onboarding.job_search_timeline}\n\n"
                f"Review: {self.settings.frontend_url}/admin/onboarding/{onboarding.id}",
            ),
        ]
        for to, subject, text in messages:
            try:
                await self.email_service.send(to, subject, text)
            except httpx.HTTPError as exc:
                logger.error(
                    "onboarding_email_failed",
                    user_id=str(client.id),
                    to=to,
                    error=str(exc),
                )

    async def get_status(self, client: Client) -> dict[str, Any]:
        """Summarise where the client stands in the onboarding flow."""
        onboarding = await self.get_for_client(client.id)

        status = "not_started"
        next_steps = "Please complete your 20-question onboarding questionnaire."
        can_access_tracker = False

        if onboarding:
            status, next_steps = STATUS_STEPS.get(
                onboarding.execution_status,
                ("unknown", "Please contact support for assistance."),
            )
            if status == "approved":
                can_access_tracker = bool(client.profile_unlocked)

        return {
            "status": status,
            "onboarding": onboarding,
            "profile": client,
            "can_access_tracker": can_access_tracker,
            "next_steps": next_steps,
        }

    async def ensure_tracker_access(self, client: Client) -> None:
        """Raise PermissionDeniedError until staff have unlocked the client's tracker."""
        if not client.profile_unlocked:
            raise PermissionDeniedError(
                "Your profile is currently locked. Please complete onboarding and wait for admin approval.",
                code="PROFILE_LOCKED",
            )

        # Unlocked accounts without a questionnaire on file keep access
        onboarding = await self.get_for_client(client.id)
        if onboarding and onboarding.execution_status != ExecutionStatus.ACTIVE.value:
            logger.info(
                "tracker_access_denied",
                client_id=str(client.id),
                execution_status=onboarding.execution_status,
            )
            raise PermissionDeniedError(
                "Your onboarding is not yet approved. Please wait for admin approval.",
                code="PROFILE_NOT_ACTIVE",
            )

    async def approve(self, onboarding_id: uuid.UUID, staff: Client) -> ClientOnboarding:
        """Activate a submitted questionnaire and unlock the client's tracker."""
        onboarding = await self.db.get(ClientOnboarding, onboarding_id)
        if not onboarding:
            raise NotFoundError("Onboarding submission not found")
        if onboarding.execution_status == ExecutionStatus.ACTIVE.value:
            raise ConflictError("Onboarding already approved", code="ALREADY_COMPLETED")

        onboarding.execution_status = ExecutionStatus.ACTIVE.value
        onboarding.approved_at = datetime.now(timezone.utc)
        onboarding.approved_by = staff.id

        client = await self.db.get(Client, onboarding.user_id)
        if client:
            client.profile_unlocked = True

        await self.db.flush()
        await self.db.refresh(onboarding)

        await self.notifications.notify_client(
            onboarding.user_id,
            type="onboarding_approved",
            title="Profile Approved",
            message="Your onboarding has been approved and your Application Tracker is now unlocked",
        )

        logger.info(
            "onboarding_approved",
            onboarding_id=str(onboarding.id),
            user_id=str(onboarding.user_id),
            approved_by=str(staff.id),
        )
        return onboarding
