"""
Error kinds shared by the Taskdesk modules.

Each module raises its own subclasses of these. Every kind carries the
HTTP status the API answers with, and ``to_dict()`` is the response body.
"""

from typing import Optional, Any


class TaskdeskError(Exception):
    """
    Base exception for all Taskdesk errors.

    Anything not covered by a more specific kind answers 500.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Response body: machine code, human message and context."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(TaskdeskError):
    """A user, todo or comment does not exist."""

    status_code = 404


class ValidationError(TaskdeskError):
    """The request is well-formed but breaks a domain rule."""

    status_code = 400


class AuthenticationError(TaskdeskError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class AuthorizationError(TaskdeskError):
    """The caller's role does not allow the operation."""

    status_code = 403


class ExternalServiceError(TaskdeskError):
    """An upstream provider (e.g. weather) failed or returned unusable data."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
