"""Consultation booking schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints

from applybureau.schemas.common import Email, PersonName, StrictSchema, TimeOfDay

PackageInterest = Literal["essential", "professional", "executive", "not_sure"]
Timeline = Literal["immediate", "1-3_months", "3-6_months", "flexible"]


class ConsultationBooking(StrictSchema):
    """Public consultation request."""

    name: PersonName
    email: Email
    phone: Annotated[str, StringConstraints(max_length=20)] | None = None
    reason: Annotated[str, StringConstraints(min_length=10, max_length=500)]
    preferred_date: datetime
    preferred_time: TimeOfDay
    package_interest: PackageInterest
    current_situation: Annotated[str, StringConstraints(max_length=500)] | None = None
    timeline: Timeline


class ConsultationResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    preferred_date: datetime
    preferred_time: str
    package_interest: str
    timeline: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ConsultationBookedResponse(BaseModel):
    success: bool = True
    message: str
    data: ConsultationResponse
