"""
Request middleware: token verification and admin access logging.
"""

from .auth import JwtAuthMiddleware, get_current_user
from .admin_access import AdminAccessMiddleware

__all__ = ["JwtAuthMiddleware", "AdminAccessMiddleware", "get_current_user"]
