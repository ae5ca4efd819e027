"""
Todos module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser, Page, PageRequest

from .models import (
    Todo,
    TodoSaveRequest,
    TodoSaveResponse,
    TodoListItem,
    TodoResponse,
)


@runtime_checkable
class ITodoRepository(Protocol):
    """Storage operations for todos."""

    def save(self, todo: Todo) -> Todo:
        ...

    def find_all_order_by_modified_desc(self, page_request: PageRequest) -> Page[Todo]:
        """Return one page of todos, most recently modified first."""
        ...

    def find_by_id_with_user(self, todo_id: int) -> Optional[Todo]:
        """Return a todo with its owner loaded, or None."""
        ...


@runtime_checkable
class IWeatherClient(Protocol):
    """Source of the weather snapshot stored on each new todo."""

    async def get_today_weather(self) -> str:
        ...


@runtime_checkable
class ITodoService(Protocol):
    """
    Interface for todo operations.
    """

    async def save_todo(
        self,
        caller: AuthenticatedUser,
        request: TodoSaveRequest,
    ) -> TodoSaveResponse:
        """
        Create a todo owned by the caller.

        Raises:
            ExternalServiceError: If the weather provider fails
        """
        ...

    async def get_todos(self, page: int = 1, size: int = 10) -> Page[TodoListItem]:
        """
        List todos, most recently modified first.

        Args:
            page: Page number (1-indexed)
            size: Items per page
        """
        ...

    async def get_todo(self, todo_id: int) -> TodoResponse:
        """
        Get a todo with its owner.

        Raises:
            TodoNotFoundError: If the todo doesn't exist
        """
        ...
