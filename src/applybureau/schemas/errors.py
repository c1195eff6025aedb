"""Error response envelopes."""

from pydantic import BaseModel


class ValidationErrorDetail(BaseModel):
    """One rule violation: where, what, and a machine-readable code."""

    field: str
    message: str
    code: str


class ValidationErrorResponse(BaseModel):
    error: str = "Validation failed"
    details: list[ValidationErrorDetail] = []
    type: str = "VALIDATION_ERROR"


class ErrorResponse(BaseModel):
    error: str
