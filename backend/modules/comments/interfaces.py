"""
Comments module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Comment


@runtime_checkable
class ICommentRepository(Protocol):
    """Storage operations for comments."""

    def find_by_id(self, comment_id: int) -> Optional[Comment]:
        ...

    def delete(self, comment: Comment) -> None:
        """
        Delete a comment in a single statement.

        Raises:
            CommentNotFoundError: If no row was removed
        """
        ...


@runtime_checkable
class ICommentAdminService(Protocol):
    """Privileged comment moderation."""

    async def delete_comment(self, comment_id: int) -> None:
        """
        Delete any comment regardless of its author.

        Raises:
            CommentNotFoundError: If the comment doesn't exist
        """
        ...
