"""Public consultation booking."""

import structlog
from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from applybureau.api.deps import DbSession, OptionalUser
from applybureau.api.validation import ConsultationBody
from applybureau.schemas.consultation import ConsultationBookedResponse
from applybureau.services.consultation_service import ConsultationService

logger = structlog.get_logger()

router = APIRouter()


@router.post("", response_model=ConsultationBookedResponse, status_code=status.HTTP_201_CREATED)
async def book_consultation(
    current_user: OptionalUser,
    db: DbSession,
    data: ConsultationBody,
):
    """Request a consultation; signing in is optional."""
    try:
        consultation = await ConsultationService(db).book(data, current_user)
    except SQLAlchemyError as e:
        logger.error("consultation_booking_error", email=data.email, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book consultation",
        )

    return {
        "message": "Consultation request received. We will confirm your time shortly.",
        "data": consultation,
    }
