"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, EmailStr, Field, computed_field

from .exceptions import ValidationError

T = TypeVar("T")


class UserRole(str, Enum):
    """Role carried by every account and every issued token."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def of(cls, role: str) -> "UserRole":
        """
        Parse a role name case-insensitively.

        Raises:
            ValidationError: If the name is not a known role
        """
        normalized = (role or "").strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(
            "Invalid user role",
            code="INVALID_USER_ROLE",
            details={"role": role},
        )


class AuthenticatedUser(BaseModel):
    """
    Represents the caller of the current request.

    Populated from the verified bearer token by the JWT middleware and
    handed to route handlers via dependency injection. Read-only.
    """

    id: int = Field(..., description="User ID")
    email: EmailStr = Field(..., description="User's email address")
    role: UserRole = Field(default=UserRole.USER, description="User role")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class PageRequest(BaseModel):
    """Zero-indexed page request handed to repositories."""

    page: int = Field(..., ge=0, description="Page index (0-indexed)")
    size: int = Field(..., ge=1, description="Items per page")

    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A page of results plus the counts needed to page through the rest."""

    content: list[T] = Field(default_factory=list)
    page: int = Field(..., description="Page number (1-indexed)")
    size: int = Field(..., description="Items per page")
    total_elements: int = Field(default=0, description="Total matching items")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return ceil(self.total_elements / self.size)
