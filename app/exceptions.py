from typing import Any, Mapping, Optional


class RecipeBoxError(Exception):
    """Base class for errors raised by services and mapped to HTTP responses.

    Attributes:
        message: human-readable message, surfaced to the client as-is
        details: optional mapping with extra context (field errors, ids)
        code: machine-readable error code used in the error envelope
        http_status: HTTP status code used by the exception handler
    """

    http_status = 500
    default_message = "Unexpected error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(RecipeBoxError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class UnauthorizedError(RecipeBoxError):
    """Raised when the caller is not authenticated or credentials are wrong."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class ForbiddenError(RecipeBoxError):
    """Raised when an authenticated caller acts on a row they do not own."""

    http_status = 403
    default_message = "Forbidden"
    default_code = "FORBIDDEN"


class NotFoundError(RecipeBoxError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(RecipeBoxError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"
