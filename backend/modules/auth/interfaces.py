"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from .models import SignupRequest, SigninRequest, SignupResponse, SigninResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def signup(self, request: SignupRequest) -> SignupResponse:
        """
        Register a new account and issue a token for it.

        Args:
            request: Email, raw password and requested role

        Returns:
            SignupResponse carrying the bearer token

        Raises:
            EmailAlreadyExistsError: If the email is already registered
            ValidationError: If the requested role is unknown
        """
        ...

    async def signin(self, request: SigninRequest) -> SigninResponse:
        """
        Verify credentials and issue a token.

        Args:
            request: Email and raw password

        Returns:
            SigninResponse carrying the bearer token

        Raises:
            UnregisteredUserError: If no account has this email
            WrongPasswordError: If the password doesn't match
        """
        ...
