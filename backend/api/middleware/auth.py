"""
JWT Authentication middleware.

Verifies the bearer token on every non-public request, attaches the
caller's ``user_id``, ``email`` and ``user_role`` to request state, and
rejects non-admin callers on admin paths.
"""

import logging
from typing import Iterable, Optional

import jwt
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from shared.exceptions import AuthenticationError, AuthorizationError, TaskdeskError
from shared.models import AuthenticatedUser, UserRole
from modules.auth.exceptions import (
    ExpiredTokenError,
    InsufficientPermissionsError,
    InvalidTokenError,
    MissingTokenError,
)

from ..dependencies import get_token_issuer

logger = logging.getLogger(__name__)


class JwtAuthMiddleware(BaseHTTPMiddleware):
    """
    Upstream identity verification for every request.

    Runs before AdminAccessMiddleware and the route handlers. Requests
    whose path starts with one of ``public_paths`` pass through untouched.
    """

    def __init__(
        self,
        app,
        public_paths: Iterable[str] = (),
        admin_path_prefix: str = "/api/admin/",
    ):
        super().__init__(app)
        self._public_paths = tuple(public_paths)
        self._admin_path_prefix = admin_path_prefix

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if request.method == "OPTIONS" or path.startswith(self._public_paths):
            return await call_next(request)

        try:
            caller = authenticate(request.headers.get("Authorization"))
            if path.startswith(self._admin_path_prefix) and caller.role != UserRole.ADMIN:
                raise InsufficientPermissionsError(UserRole.ADMIN.value, caller.role.value)
        except AuthenticationError as e:
            return JSONResponse(
                status_code=e.status_code,
                content=e.to_dict(),
                headers={"WWW-Authenticate": "Bearer"},
            )
        except AuthorizationError as e:
            logger.warning(f"Forbidden admin request: userId={caller.id}, uri={path}")
            return JSONResponse(status_code=e.status_code, content=e.to_dict())

        request.state.user_id = caller.id
        request.state.email = caller.email
        request.state.user_role = caller.role
        return await call_next(request)


def authenticate(authorization: Optional[str]) -> AuthenticatedUser:
    """
    Turn an Authorization header value into the calling user.

    Raises:
        MissingTokenError: If the header is absent or empty
        ExpiredTokenError: If the token has expired
        InvalidTokenError: If the token or its claims are invalid
    """
    if not authorization:
        raise MissingTokenError()

    try:
        claims = get_token_issuer().decode_token(authorization)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {e}")

    try:
        return AuthenticatedUser(
            id=int(claims["sub"]),
            email=claims.get("email"),
            role=UserRole.of(claims.get("userRole", "")),
        )
    except (KeyError, ValueError, TaskdeskError) as e:
        raise InvalidTokenError(f"Invalid token claims: {e}")


async def get_current_user(request: Request) -> AuthenticatedUser:
    """
    Dependency returning the caller attached by JwtAuthMiddleware.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise MissingTokenError()

    return AuthenticatedUser(
        id=user_id,
        email=request.state.email,
        role=request.state.user_role,
    )
