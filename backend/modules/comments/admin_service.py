"""
Privileged comment moderation.

Only reachable through the admin routes, which audit every call.
Any comment can be deleted regardless of its author.
"""

import logging

from .interfaces import ICommentAdminService, ICommentRepository
from .exceptions import CommentNotFoundError

logger = logging.getLogger(__name__)


class CommentAdminService(ICommentAdminService):
    """Comment deletion for administrators."""

    def __init__(self, comment_repository: ICommentRepository):
        self._comments = comment_repository

    async def delete_comment(self, comment_id: int) -> None:
        comment = self._comments.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)

        self._comments.delete(comment)
        logger.info(f"Comment {comment_id} deleted")
