"""
Users module data models.

User is the persisted account entity. The request/response models are
what the routes accept and return.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AuthenticatedUser, UserRole

PASSWORD_RULE = re.compile(r"^(?=.*\d)(?=.*[A-Z]).{8,}$")


class User(BaseModel):
    """
    A user account.

    ``password`` only ever holds the encoded form. It is None on the
    lightweight references built from an AuthenticatedUser.
    """

    id: Optional[int] = None
    email: EmailStr
    password: Optional[str] = None
    user_role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def from_authenticated_user(cls, caller: AuthenticatedUser) -> "User":
        """Build an owner reference for the current caller without a lookup."""
        return cls(id=caller.id, email=caller.email, user_role=caller.role)

    def change_password(self, encoded_password: str) -> None:
        self.password = encoded_password

    def update_role(self, user_role: UserRole) -> None:
        self.user_role = user_role


class UserResponse(BaseModel):
    """Public projection of a user."""

    id: int
    email: EmailStr


class UserChangePasswordRequest(BaseModel):
    """Request to change the caller's own password."""

    old_password: str = Field(..., min_length=1)
    new_password: str = Field(
        ...,
        description="At least 8 characters, with a digit and an upper-case letter",
    )

    @field_validator("new_password")
    @classmethod
    def check_password_rule(cls, value: str) -> str:
        if not PASSWORD_RULE.match(value):
            raise ValueError(
                "New password must be at least 8 characters and contain "
                "a digit and an upper-case letter"
            )
        return value


class UserRoleChangeRequest(BaseModel):
    """Admin request to change a user's role."""

    role: str = Field(..., min_length=1, description="USER or ADMIN")
