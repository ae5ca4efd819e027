"""
Todo service implementation.

Creates todos for the caller with a weather snapshot and serves
paged and single-item reads.
"""

import logging

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser, Page, PageRequest
from modules.users.models import User, UserResponse

from .interfaces import ITodoService, ITodoRepository, IWeatherClient
from .models import (
    Todo,
    TodoSaveRequest,
    TodoSaveResponse,
    TodoListItem,
    TodoResponse,
)
from .exceptions import TodoNotFoundError

logger = logging.getLogger(__name__)


class TodoService(ITodoService):
    """Todo operations backed by a repository and a weather provider."""

    def __init__(
        self,
        todo_repository: ITodoRepository,
        weather_client: IWeatherClient,
    ):
        self._todos = todo_repository
        self._weather = weather_client

    async def save_todo(
        self,
        caller: AuthenticatedUser,
        request: TodoSaveRequest,
    ) -> TodoSaveResponse:
        """Create a todo for the caller; weather provider errors propagate."""
        weather = await self._weather.get_today_weather()

        owner = User.from_authenticated_user(caller)
        saved = self._todos.save(
            Todo(
                title=request.title,
                contents=request.contents,
                weather=weather,
                user=owner,
            )
        )
        logger.debug(f"Todo {saved.id} created by user {caller.id}")

        return TodoSaveResponse(
            id=saved.id,
            title=saved.title,
            contents=saved.contents,
            weather=saved.weather,
            user=UserResponse(id=owner.id, email=owner.email),
        )

    async def get_todos(self, page: int = 1, size: int = 10) -> Page[TodoListItem]:
        if page < 1 or size < 1:
            raise ValidationError(
                "Page and size must be positive",
                details={"page": page, "size": size},
            )

        result = self._todos.find_all_order_by_modified_desc(
            PageRequest(page=page - 1, size=size)
        )

        return Page[TodoListItem](
            content=[
                TodoListItem(
                    id=todo.id,
                    title=todo.title,
                    contents=todo.contents,
                    weather=todo.weather,
                    user_id=todo.user.id,
                    created_at=todo.created_at,
                    modified_at=todo.modified_at,
                )
                for todo in result.content
            ],
            page=page,
            size=size,
            total_elements=result.total_elements,
        )

    async def get_todo(self, todo_id: int) -> TodoResponse:
        todo = self._todos.find_by_id_with_user(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)

        return TodoResponse(
            id=todo.id,
            title=todo.title,
            contents=todo.contents,
            weather=todo.weather,
            user=UserResponse(id=todo.user.id, email=todo.user.email),
            created_at=todo.created_at,
            modified_at=todo.modified_at,
        )
