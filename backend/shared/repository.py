"""
Base repository for the Supabase-backed tables.

Each repository owns one table, named by its ``TABLE`` attribute, and maps
rows to the module's pydantic models.
"""

from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for the users, todos and comments repositories.

    Subclasses set ``TABLE`` and keep row mapping private, e.g.::

        class CommentRepository(BaseRepository[Comment]):
            TABLE = "comments"

            def find_by_id(self, comment_id: int) -> Optional[Comment]:
                row = self._find_one("id", comment_id)
                return self._map_to_comment(row) if row else None

    Repositories never check ownership or roles.
    """

    TABLE: str = ""

    def __init__(self, db: Client) -> None:
        self._db = db

    def _table(self):
        """Query builder for this repository's table."""
        return self._db.table(self.TABLE)

    def _find_one(
        self,
        column: str,
        value: Any,
        columns: str = "*",
    ) -> Optional[dict[str, Any]]:
        """Select the row whose ``column`` equals ``value``, or None."""
        return self._first(self._table().select(columns).eq(column, value).execute())

    @staticmethod
    def _first(result: Any) -> Optional[dict[str, Any]]:
        """Return the first row of a query result, or None if it is empty."""
        if not result.data:
            return None
        return result.data[0]
