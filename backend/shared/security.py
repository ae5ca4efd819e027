"""
Credential and token primitives.

PasswordEncoder wraps Argon2 for one-way password storage.
JwtTokenIssuer issues and decodes the bearer tokens handed out at
signup/signin and verified by the API middleware.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .models import UserRole

BEARER_PREFIX = "Bearer "


class PasswordEncoder:
    """One-way password encoding backed by Argon2."""

    def __init__(self, hasher: Optional[PasswordHasher] = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def encode(self, raw_password: str) -> str:
        return self._hasher.hash(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Return True if raw_password hashes to encoded_password."""
        try:
            return self._hasher.verify(encoded_password, raw_password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False


class JwtTokenIssuer:
    """
    Issues signed, role-bearing identity tokens.

    Tokens carry the user ID as ``sub`` plus ``email`` and ``userRole``
    claims, and are returned with the ``Bearer `` prefix so clients can
    pass them straight into the Authorization header.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 60,
    ) -> None:
        if not secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(minutes=expiration_minutes)

    def create_token(self, user_id: int, email: str, user_role: UserRole) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "userRole": user_role.value,
            "iat": now,
            "exp": now + self._expiration,
        }
        return BEARER_PREFIX + jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode_token(self, token: str) -> dict[str, Any]:
        """
        Verify a token and return its claims.

        Accepts the token with or without the ``Bearer `` prefix.

        Raises:
            jwt.ExpiredSignatureError: If the token has expired
            jwt.InvalidTokenError: If the token is malformed or badly signed
        """
        return jwt.decode(
            strip_bearer_prefix(token),
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp"]},
        )


def strip_bearer_prefix(token: str) -> str:
    if token.startswith(BEARER_PREFIX):
        return token[len(BEARER_PREFIX):]
    return token
