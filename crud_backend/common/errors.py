"""
Error Definitions

Exceptions raised by services and rendered by the application-wide
exception handler as ``{"error": {"message", "type", "code"}}``.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Subclasses set ``status_code``, ``error_type`` and the defaults for
    message and code.
    """

    status_code: int = 500
    error_type: str = "app_error"
    default_message: str = "Application error"
    default_code: str = "internal_error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message (client visible)
            code: Machine-readable error code
            details: Extra error details, only returned in DEBUG mode
        """
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to API response body

        Args:
            include_details: Whether to include ``details``
        """
        error: dict[str, Any] = {
            "message": self.message,
            "type": self.error_type,
            "code": self.code,
        }
        if include_details and self.details:
            error["details"] = self.details
        return {"error": error}


class BadRequestError(AppError):
    """Malformed request, e.g. an identifier that is not a valid ObjectId"""

    status_code = 400
    error_type = "bad_request_error"
    default_message = "Bad request"
    default_code = "bad_request"


class NotFoundError(AppError):
    """Requested entity or activity log does not exist"""

    status_code = 404
    error_type = "not_found_error"
    default_message = "Resource not found"
    default_code = "not_found"


class InternalServerError(AppError):
    """
    Unexpected failure of an operation

    The original exception is chained as ``__cause__`` and never exposed
    to clients.
    """

    status_code = 500
    error_type = "internal_error"
    default_message = "Internal server error"
    default_code = "internal_error"
