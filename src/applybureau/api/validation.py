"""Request body validation.

``validate_body(schema)`` turns a request schema into a FastAPI dependency.
The dependency parses the raw JSON body against the schema and hands the
handler the sanitized, typed model. Any failure stops the request with a
400 ``VALIDATION_ERROR`` response; the handler never runs.

Because the dependency reads ``Request`` itself, FastAPI does not see a body
parameter and the generated OpenAPI document lists no request body for these
routes. The request schemas in ``applybureau.schemas`` are the reference for
clients.
"""

from typing import Annotated, Any, Awaitable, Callable, Iterable, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from applybureau.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationUpdate,
)
from applybureau.schemas.auth import CompleteRegistrationRequest, InviteRequest, LoginRequest
from applybureau.schemas.consultation import ConsultationBooking
from applybureau.schemas.errors import ValidationErrorDetail
from applybureau.schemas.onboarding import OnboardingQuestionnaire

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class RequestValidationFailed(Exception):
    """The request body did not satisfy its schema."""

    def __init__(
        self,
        details: list[ValidationErrorDetail] | None = None,
        message: str = "Validation failed",
    ):
        super().__init__(message)
        self.message = message
        self.details = details or []


def format_errors(errors: Iterable[dict[str, Any]]) -> list[ValidationErrorDetail]:
    """Convert pydantic error dicts into ``{field, message, code}`` entries."""
    return [
        ValidationErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ())),
            message=error.get("msg", "Invalid value"),
            code=error.get("type", "invalid"),
        )
        for error in errors
    ]


def parse_body(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate ``payload`` against ``schema``.

    Raises RequestValidationFailed for rule violations and for anything else
    that goes wrong while coercing the input.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationFailed(format_errors(exc.errors())) from exc
    except Exception as exc:
        raise RequestValidationFailed(message="Invalid request data") from exc


def sanitize(schema: type[BaseModel], payload: Any) -> dict[str, Any]:
    """The JSON body a handler effectively receives for ``payload``."""
    return parse_body(schema, payload).model_dump(mode="json", exclude_none=True)


def validate_body(schema: type[SchemaT]) -> Callable[[Request], Awaitable[SchemaT]]:
    """Build a dependency that validates the request body against ``schema``."""

    async def dependency(request: Request) -> SchemaT:
        try:
            payload = await request.json()
        except Exception as exc:
            raise RequestValidationFailed(message="Invalid request data") from exc
        return parse_body(schema, payload)

    dependency.__name__ = f"validate_{schema.__name__}"
    return dependency


validate_onboarding = validate_body(OnboardingQuestionnaire)
validate_login = validate_body(LoginRequest)
validate_invite = validate_body(InviteRequest)
validate_registration = validate_body(CompleteRegistrationRequest)
validate_create_application = validate_body(ApplicationCreate)
validate_update_application = validate_body(ApplicationUpdate)
validate_update_application_status = validate_body(ApplicationStatusUpdate)
validate_consultation_booking = validate_body(ConsultationBooking)

# Validated bodies for route signatures
OnboardingBody = Annotated[OnboardingQuestionnaire, Depends(validate_onboarding)]
CreateApplicationBody = Annotated[ApplicationCreate, Depends(validate_create_application)]
UpdateApplicationBody = Annotated[ApplicationUpdate, Depends(validate_update_application)]
ApplicationStatusBody = Annotated[ApplicationStatusUpdate, Depends(validate_update_application_status)]
ConsultationBody = Annotated[ConsultationBooking, Depends(validate_consultation_booking)]
