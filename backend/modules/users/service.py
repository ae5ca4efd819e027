"""
User service implementation.

Self-service profile reads and password changes.
"""

import logging

from shared.security import PasswordEncoder

from .interfaces import IUserService, IUserRepository
from .models import UserResponse, UserChangePasswordRequest
from .exceptions import UserNotFoundError, SamePasswordError, InvalidPasswordError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Implementation of the user service.

    Every operation looks the user up first and fails with
    UserNotFoundError before touching anything else.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_encoder: PasswordEncoder,
    ):
        self._users = user_repository
        self._password_encoder = password_encoder

    async def get_user(self, user_id: int) -> UserResponse:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return UserResponse(id=user.id, email=user.email)

    async def change_password(
        self,
        user_id: int,
        request: UserChangePasswordRequest,
    ) -> None:
        """
        Change a user's password.

        The old/new comparison is on the raw values and happens before the
        stored hash is consulted.
        """
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if request.new_password == request.old_password:
            raise SamePasswordError()

        if not self._password_encoder.matches(request.old_password, user.password or ""):
            raise InvalidPasswordError()

        user.change_password(self._password_encoder.encode(request.new_password))
        self._users.save(user)
        logger.info(f"Password changed for user {user_id}")
