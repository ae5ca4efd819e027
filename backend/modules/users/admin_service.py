"""
Privileged user operations.

Only reachable through the admin routes, which audit every call.
"""

import logging

from shared.models import UserRole

from .interfaces import IUserAdminService, IUserRepository
from .models import UserRoleChangeRequest
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserAdminService(IUserAdminService):
    """Role management for administrators."""

    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    async def change_user_role(
        self,
        user_id: int,
        request: UserRoleChangeRequest,
    ) -> None:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.update_role(UserRole.of(request.role))
        self._users.save(user)
        logger.info(f"Role of user {user_id} changed to {user.user_role.value}")
