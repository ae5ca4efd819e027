"""
Admin access logging middleware.

Logs one line for every request under the admin path prefix. It never
blocks a request; JwtAuthMiddleware has already checked the role.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class AdminAccessMiddleware(BaseHTTPMiddleware):
    """Observation-only logging of admin-path traffic."""

    def __init__(self, app, admin_path_prefix: str = "/api/admin/"):
        super().__init__(app)
        self._admin_path_prefix = admin_path_prefix

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        uri = request.url.path
        if uri.startswith(self._admin_path_prefix):
            log_admin_access(
                uri,
                user_id=getattr(request.state, "user_id", None),
                email=getattr(request.state, "email", None),
            )
        return await call_next(request)


def log_admin_access(uri: str, user_id: Optional[int], email: Optional[str]) -> None:
    request_time = datetime.now().strftime(TIME_FORMAT)
    logger.info(
        f"[ADMIN_ACCESS] userId={user_id}, email={email}, uri={uri}, time={request_time}",
        extra={
            "user_id": user_id,
            "email": email,
            "uri": uri,
            "request_time": request_time,
        },
    )
