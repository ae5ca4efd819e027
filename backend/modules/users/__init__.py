"""
Users module.

Handles user profiles, password changes and admin role changes.

Public API:
- IUserService / IUserAdminService: Interfaces for user operations
- IUserRepository: Storage capability shared with the auth module
- User, UserResponse and request models
- UserNotFoundError, SamePasswordError, InvalidPasswordError
"""

from .interfaces import IUserRepository, IUserService, IUserAdminService
from .models import User, UserResponse, UserChangePasswordRequest, UserRoleChangeRequest
from .exceptions import UserNotFoundError, SamePasswordError, InvalidPasswordError

__all__ = [
    # Interfaces
    "IUserRepository",
    "IUserService",
    "IUserAdminService",
    # Models
    "User",
    "UserResponse",
    "UserChangePasswordRequest",
    "UserRoleChangeRequest",
    # Exceptions
    "UserNotFoundError",
    "SamePasswordError",
    "InvalidPasswordError",
]
