"""
Comment repository for database access.

Encapsulates Supabase queries and row mapping for the ``comments`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Comment
from .exceptions import CommentNotFoundError


class CommentRepository(BaseRepository[Comment]):
    """Repository for comments."""

    TABLE = "comments"

    def find_by_id(self, comment_id: int) -> Optional[Comment]:
        row = self._find_one("id", comment_id)
        return self._map_to_comment(row) if row else None

    def delete(self, comment: Comment) -> None:
        """
        Delete a comment by ID.

        The delete is a single statement that returns the removed rows, so
        a comment removed concurrently after the lookup shows up here as
        an empty result.
        """
        result = self._table().delete().eq("id", comment.id).execute()
        if not result.data:
            raise CommentNotFoundError(comment.id)

    @staticmethod
    def _map_to_comment(row: dict[str, Any]) -> Comment:
        return Comment(
            id=row["id"],
            contents=row["contents"],
            todo_id=row["todo_id"],
            user_id=row["user_id"],
            created_at=row.get("created_at"),
            modified_at=row.get("modified_at"),
        )
