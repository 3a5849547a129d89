"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception.

    Every subclass carries the HTTP status it is rendered with by the
    application's error handlers.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppException):
    """Missing required fields or a malformed request body."""

    status_code = 400

    def __init__(self, message: str, fields: Optional[list[str]] = None):
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details={"fields": fields} if fields else {},
        )


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} with id {resource_id} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class StartupLoadError(AppException):
    """Seed file missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not load books from {path}: {reason}",
            error_code="STARTUP_LOAD_ERROR",
            details={"path": path},
        )
        self.path = path
        self.reason = reason
