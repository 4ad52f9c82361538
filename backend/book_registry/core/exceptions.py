"""Custom exceptions for the book registry."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class MalformedInputError(AppException):
    """Request body or id segment could not be decoded."""

    status_code = 400

    def __init__(self, message: str = "Invalid input", field: Optional[str] = None):
        super().__init__(
            message,
            error_code="MALFORMED_INPUT",
            details={"field": field} if field else {},
        )


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class MethodNotSupportedError(AppException):
    """HTTP verb not wired for the requested path."""

    status_code = 405

    def __init__(self, method: str, allowed: Optional[list[str]] = None):
        super().__init__(
            "Method not allowed",
            error_code="METHOD_NOT_ALLOWED",
            details={"method": method, "allowed": allowed or []},
        )
