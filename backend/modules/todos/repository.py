"""
Todo repository for database access.

Encapsulates Supabase queries and row mapping for the ``todos`` table.
The owner is embedded through the ``user_id`` foreign key to ``users``.
"""

from typing import Any, Optional

from shared.models import Page, PageRequest, UserRole
from shared.repository import BaseRepository
from modules.users.models import User

from .models import Todo

TODO_WITH_USER = "*, user:users(id, email, user_role)"


class TodoRepository(BaseRepository[Todo]):
    """Repository for todos."""

    TABLE = "todos"

    def save(self, todo: Todo) -> Todo:
        data = {
            "title": todo.title,
            "contents": todo.contents,
            "weather": todo.weather,
            "user_id": todo.user.id,
        }
        result = self._table().insert(data).execute()
        return self._map_to_todo(result.data[0], owner=todo.user)

    def find_all_order_by_modified_desc(self, page_request: PageRequest) -> Page[Todo]:
        start = page_request.offset
        end = start + page_request.size - 1

        result = (
            self._table()
            .select(TODO_WITH_USER, count="exact")
            .order("modified_at", desc=True)
            .range(start, end)
            .execute()
        )

        return Page[Todo](
            content=[self._map_to_todo(row) for row in result.data],
            page=page_request.page + 1,
            size=page_request.size,
            total_elements=result.count or 0,
        )

    def find_by_id_with_user(self, todo_id: int) -> Optional[Todo]:
        row = self._find_one("id", todo_id, columns=TODO_WITH_USER)
        return self._map_to_todo(row) if row else None

    @staticmethod
    def _map_to_todo(row: dict[str, Any], owner: Optional[User] = None) -> Todo:
        if owner is None:
            user_row = row["user"]
            owner = User(
                id=user_row["id"],
                email=user_row["email"],
                user_role=UserRole(user_row.get("user_role", UserRole.USER.value)),
            )

        return Todo(
            id=row["id"],
            title=row["title"],
            contents=row["contents"],
            weather=row["weather"],
            user=owner,
            created_at=row.get("created_at"),
            modified_at=row.get("modified_at"),
        )
