"""Consultation booking."""

import httpx
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from applybureau.models.client import Client
from applybureau.models.consultation import ConsultationRequest
from applybureau.schemas.consultation import ConsultationBooking
from applybureau.services.client_service import ClientService
from applybureau.services.email_service import EmailService
from applybureau.services.notification_service import NotificationService

logger = structlog.get_logger()


class ConsultationService:
    """Records consultation requests from the public booking form."""

    def __init__(self, db: AsyncSession, email_service: EmailService | None = None):
        self.db = db
        self.email_service = email_service or EmailService()
        self.notifications = NotificationService(db)

    async def book(self, data: ConsultationBooking, user: Client | None = None) -> ConsultationRequest:
        """Store a booking, linking it to an existing account when possible."""
        if user is None:
            user = await ClientService(self.db).get_by_email(data.email)

        consultation = ConsultationRequest(
            user_id=user.id if user else None,
            **data.model_dump(),
        )
        self.db.add(consultation)
        await self.db.flush()
        await self.db.refresh(consultation)

        await self.notifications.notify_admins(
            type="consultation_requested",
            title="New Consultation Request",
            message=(
                f"{consultation.name} requested a consultation "
                f"({consultation.package_interest}) for "
                f"{consultation.preferred_date:%Y-%m-%d} at {consultation.preferred_time}"
            ),
        )

        try:
            await self.email_service.send(
                consultation.email,
                "Consultation request received",
                f"Hi {consultation.name},\n\n"
                "We received your consultation request and will confirm a time shortly.",
            )
        except httpx.HTTPError as exc:
            logger.error("consultation_email_failed", consultation_id=str(consultation.id), error=str(exc))

        logger.info(
            "consultation_booked",
            consultation_id=str(consultation.id),
            user_id=str(consultation.user_id) if consultation.user_id else None,
            package_interest=consultation.package_interest,
        )
        return consultation
