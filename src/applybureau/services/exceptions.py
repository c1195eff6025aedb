"""Domain errors raised by services and rendered by the API layer."""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 400

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409


class PermissionDeniedError(ServiceError):
    status_code = 403
