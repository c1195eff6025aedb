"""Exception handlers mapping errors onto the JSON error envelopes."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from applybureau.api.validation import RequestValidationFailed, format_errors
from applybureau.schemas.errors import ValidationErrorDetail, ValidationErrorResponse
from applybureau.services.exceptions import ServiceError

logger = structlog.get_logger()


def validation_response(
    request: Request,
    details: list[ValidationErrorDetail],
    message: str = "Validation failed",
) -> JSONResponse:
    logger.warning(
        "validation_failed",
        path=request.url.path,
        method=request.method,
        fields=[detail.field for detail in details],
    )
    body = ValidationErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def request_validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    return validation_response(request, exc.details, exc.message)


async def parameter_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return validation_response(request, format_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    content = {"error": exc.message}
    if exc.code:
        content["code"] = exc.code
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationFailed, request_validation_failed_handler)
    app.add_exception_handler(RequestValidationError, parameter_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
