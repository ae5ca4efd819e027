import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from shared.exceptions import ExternalServiceError, ValidationError
from shared.models import AuthenticatedUser, Page, PageRequest, UserRole
from modules.todos.service import TodoService
from modules.todos.models import Todo, TodoSaveRequest
from modules.todos.exceptions import TodoNotFoundError, WeatherFetchError
from modules.users.models import User


def make_todo(todo_id: int, title: str, weather: str = "Sunny", modified_hour: int = 0) -> Todo:
    return Todo(
        id=todo_id,
        title=title,
        contents=f"Contents of {title}",
        weather=weather,
        user=User(id=1, email="test@test.com", user_role=UserRole.USER),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        modified_at=datetime(2024, 1, 1, modified_hour, tzinfo=timezone.utc),
    )


class TestTodoService:
    @pytest.fixture
    def todo_repository(self):
        return MagicMock()

    @pytest.fixture
    def weather_client(self):
        client = AsyncMock()
        client.get_today_weather.return_value = "Sunny"
        return client

    @pytest.fixture
    def service(self, todo_repository, weather_client):
        return TodoService(todo_repository, weather_client)

    @pytest.fixture
    def caller(self):
        return AuthenticatedUser(id=1, email="test@test.com", role=UserRole.USER)

    @pytest.mark.asyncio
    async def test_save_todo_success(self, service, todo_repository, weather_client, caller):
        """Should store the weather snapshot and the caller as owner."""
        todo_repository.save.side_effect = lambda todo: todo.model_copy(update={"id": 10})

        response = await service.save_todo(
            caller, TodoSaveRequest(title="Test Title", contents="Test Contents")
        )

        assert response.id == 10
        assert response.title == "Test Title"
        assert response.contents == "Test Contents"
        assert response.weather == "Sunny"
        assert response.user.id == 1
        assert response.user.email == "test@test.com"
        weather_client.get_today_weather.assert_awaited_once()

        saved = todo_repository.save.call_args.args[0]
        assert saved.user.id == caller.id
        assert saved.weather == "Sunny"

    @pytest.mark.asyncio
    async def test_save_todo_weather_failure_propagates(
        self, service, todo_repository, weather_client, caller
    ):
        """Weather provider errors should reach the caller and nothing is saved."""
        weather_client.get_today_weather.side_effect = WeatherFetchError("No weather data")

        with pytest.raises(ExternalServiceError):
            await service.save_todo(caller, TodoSaveRequest(title="T", contents="C"))

        todo_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_todos_success(self, service, todo_repository):
        """Page 1 should map to page index 0 and keep repository order."""
        todo_repository.find_all_order_by_modified_desc.return_value = Page[Todo](
            content=[make_todo(2, "Title 1", modified_hour=5), make_todo(1, "Title 2", modified_hour=1)],
            page=1,
            size=10,
            total_elements=2,
        )

        result = await service.get_todos(1, 10)

        assert len(result.content) == 2
        assert result.content[0].title == "Title 1"
        assert result.content[1].title == "Title 2"
        assert result.content[0].user_id == 1
        assert result.page == 1
        assert result.total_elements == 2
        todo_repository.find_all_order_by_modified_desc.assert_called_once_with(
            PageRequest(page=0, size=10)
        )

    @pytest.mark.asyncio
    async def test_get_todos_rejects_non_positive_page(self, service, todo_repository):
        """Page numbers start at 1."""
        with pytest.raises(ValidationError):
            await service.get_todos(0, 10)

        todo_repository.find_all_order_by_modified_desc.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_todo_success(self, service, todo_repository, weather_client):
        """Should return the stored weather, not the provider's current value."""
        todo_repository.find_by_id_with_user.return_value = make_todo(1, "Test Title", weather="Sunny")
        weather_client.get_today_weather.return_value = "Rainy"

        response = await service.get_todo(1)

        assert response.title == "Test Title"
        assert response.weather == "Sunny"
        assert response.user.email == "test@test.com"
        todo_repository.find_by_id_with_user.assert_called_once_with(1)
        weather_client.get_today_weather.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_todo_not_found(self, service, todo_repository):
        """Missing todo should raise TodoNotFoundError."""
        todo_repository.find_by_id_with_user.return_value = None

        with pytest.raises(TodoNotFoundError) as exc_info:
            await service.get_todo(999)

        assert exc_info.value.message == "Todo not found"
