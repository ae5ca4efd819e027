"""
Authentication module exceptions.

These exceptions are raised by the auth service and the JWT middleware
and are turned into HTTP responses by the API layer.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class EmailAlreadyExistsError(ValidationError):
    """Raised on signup when the email is already registered."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": email},
        )


class UnregisteredUserError(NotFoundError):
    """Raised on signin when no account has the given email."""

    def __init__(self, email: str):
        super().__init__(
            "User not registered",
            code="USER_NOT_REGISTERED",
            details={"email": email},
        )


class WrongPasswordError(AuthenticationError):
    """Raised on signin when the password does not match."""

    def __init__(self):
        super().__init__("Wrong password", code="WRONG_PASSWORD")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )
