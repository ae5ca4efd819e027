"""
Comments module.

Only privileged moderation (deletion) lives here.
"""

from .interfaces import ICommentAdminService, ICommentRepository
from .models import Comment
from .exceptions import CommentNotFoundError

__all__ = [
    "ICommentAdminService",
    "ICommentRepository",
    "Comment",
    "CommentNotFoundError",
]
