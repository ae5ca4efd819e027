"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class SamePasswordError(ValidationError):
    """Raised when the new password equals the current one."""

    def __init__(self):
        super().__init__(
            "New password must differ from the current password",
            code="SAME_PASSWORD",
        )


class InvalidPasswordError(ValidationError):
    """Raised when the supplied current password does not match."""

    def __init__(self):
        super().__init__("Wrong password", code="INVALID_PASSWORD")
