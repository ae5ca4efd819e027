"""
Users module interfaces.

IUserRepository is the storage capability the auth and users services
depend on. IUserService and IUserAdminService are what the routes use.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User, UserResponse, UserChangePasswordRequest, UserRoleChangeRequest


@runtime_checkable
class IUserRepository(Protocol):
    """Storage operations for user accounts."""

    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def exists_by_email(self, email: str) -> bool:
        ...

    def save(self, user: User) -> User:
        """Insert a new user (id is None) or update an existing one."""
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for self-service user operations.
    """

    async def get_user(self, user_id: int) -> UserResponse:
        """
        Get a user's public profile.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def change_password(
        self,
        user_id: int,
        request: UserChangePasswordRequest,
    ) -> None:
        """
        Change a user's password.

        Raises:
            UserNotFoundError: If the user doesn't exist
            SamePasswordError: If the new password equals the old one
            InvalidPasswordError: If the old password doesn't match
        """
        ...


@runtime_checkable
class IUserAdminService(Protocol):
    """Privileged user operations, reachable only from admin routes."""

    async def change_user_role(
        self,
        user_id: int,
        request: UserRoleChangeRequest,
    ) -> None:
        """
        Change a user's role.

        Raises:
            UserNotFoundError: If the user doesn't exist
            ValidationError: If the role name is unknown
        """
        ...
