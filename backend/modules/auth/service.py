"""
Authentication service implementation.

Registers accounts and exchanges credentials for bearer tokens.
"""

import logging

from shared.models import UserRole
from shared.security import JwtTokenIssuer, PasswordEncoder
from modules.users.interfaces import IUserRepository
from modules.users.models import User

from .interfaces import IAuthService
from .models import SignupRequest, SigninRequest, SignupResponse, SigninResponse
from .exceptions import EmailAlreadyExistsError, UnregisteredUserError, WrongPasswordError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are only ever stored in encoded form. Tokens are produced
    by the injected issuer and returned untouched.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_encoder: PasswordEncoder,
        token_issuer: JwtTokenIssuer,
    ):
        self._users = user_repository
        self._password_encoder = password_encoder
        self._token_issuer = token_issuer

    async def signup(self, request: SignupRequest) -> SignupResponse:
        # Nothing is encoded or saved for a duplicate email.
        if self._users.exists_by_email(request.email):
            raise EmailAlreadyExistsError(request.email)

        encoded_password = self._password_encoder.encode(request.password)
        user_role = UserRole.of(request.user_role)

        saved = self._users.save(
            User(email=request.email, password=encoded_password, user_role=user_role)
        )
        logger.info(f"Registered user {saved.id} with role {saved.user_role.value}")

        token = self._token_issuer.create_token(saved.id, saved.email, saved.user_role)
        return SignupResponse(bearer_token=token)

    async def signin(self, request: SigninRequest) -> SigninResponse:
        user = self._users.find_by_email(request.email)
        if user is None:
            raise UnregisteredUserError(request.email)

        if not self._password_encoder.matches(request.password, user.password or ""):
            raise WrongPasswordError()

        token = self._token_issuer.create_token(user.id, user.email, user.user_role)
        return SigninResponse(bearer_token=token)
