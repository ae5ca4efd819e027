"""
User repository for database access.

Encapsulates Supabase queries and row mapping for the ``users`` table.
Email uniqueness is also enforced by a unique index on ``users.email``.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import UserRole
from shared.repository import BaseRepository

from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.

    Note: This repository does NOT perform authorization checks.
    """

    TABLE = "users"

    def find_by_id(self, user_id: int) -> Optional[User]:
        row = self._find_one("id", user_id)
        return self._map_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        result = self._table().select("*").eq("email", email).limit(1).execute()
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        result = self._table().select("id").eq("email", email).limit(1).execute()
        return bool(result.data)

    def save(self, user: User) -> User:
        """
        Insert or update a user.

        Users without an ID are inserted; the returned model carries the
        generated ID and timestamps.
        """
        data: dict[str, Any] = {
            "email": user.email,
            "password": user.password,
            "user_role": user.user_role.value,
        }

        if user.id is None:
            result = self._table().insert(data).execute()
        else:
            data["modified_at"] = datetime.now(timezone.utc).isoformat()
            result = self._table().update(data).eq("id", user.id).execute()

        return self._map_to_user(result.data[0])

    @staticmethod
    def _map_to_user(row: dict[str, Any]) -> User:
        return User(
            id=row["id"],
            email=row["email"],
            password=row.get("password"),
            user_role=UserRole(row.get("user_role", UserRole.USER.value)),
            created_at=row.get("created_at"),
            modified_at=row.get("modified_at"),
        )
