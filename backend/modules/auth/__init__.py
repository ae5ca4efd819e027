"""
Authentication module.

Handles account registration, signin and token-related errors.

Public API:
- IAuthService: Interface for auth operations
- SignupRequest / SigninRequest and their responses
- Auth exceptions: EmailAlreadyExistsError, WrongPasswordError, token errors
"""

from .interfaces import IAuthService
from .models import SignupRequest, SigninRequest, SignupResponse, SigninResponse
from .exceptions import (
    EmailAlreadyExistsError,
    UnregisteredUserError,
    WrongPasswordError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "SignupRequest",
    "SigninRequest",
    "SignupResponse",
    "SigninResponse",
    # Exceptions
    "EmailAlreadyExistsError",
    "UnregisteredUserError",
    "WrongPasswordError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InsufficientPermissionsError",
]
