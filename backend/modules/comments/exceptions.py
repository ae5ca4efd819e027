"""
Comments module exceptions.
"""

from shared.exceptions import NotFoundError


class CommentNotFoundError(NotFoundError):
    """Raised when a comment does not exist (or was already removed)."""

    def __init__(self, comment_id: int):
        super().__init__(
            "Comment not found",
            code="COMMENT_NOT_FOUND",
            details={"comment_id": comment_id},
        )
