"""Tests for todos repository."""

from unittest.mock import MagicMock

from shared.models import PageRequest, UserRole
from modules.todos.models import Todo
from modules.todos.repository import TodoRepository
from modules.users.models import User


def create_mock_todo_data(todo_id: int = 1, title: str = "Title") -> dict:
    """Helper to create a todo row with its embedded owner."""
    return {
        "id": todo_id,
        "title": title,
        "contents": "Contents",
        "weather": "Sunny",
        "user_id": 1,
        "created_at": "2024-01-01T00:00:00+00:00",
        "modified_at": "2024-01-02T00:00:00+00:00",
        "user": {"id": 1, "email": "test@test.com", "user_role": "USER"},
    }


class TestTodoRepository:
    def test_save(self):
        """Should insert with the owner's id and keep the owner on the result."""
        mock_db = MagicMock()
        row = create_mock_todo_data(todo_id=5)
        del row["user"]
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [row]
        repo = TodoRepository(mock_db)
        owner = User(id=1, email="test@test.com")

        saved = repo.save(Todo(title="Title", contents="Contents", weather="Sunny", user=owner))

        assert saved.id == 5
        assert saved.user == owner
        inserted = mock_db.table.return_value.insert.call_args.args[0]
        assert inserted["user_id"] == 1
        assert inserted["weather"] == "Sunny"

    def test_find_all_order_by_modified_desc(self):
        """Should order by modified_at desc and translate the page to a row range."""
        mock_db = MagicMock()
        query = mock_db.table.return_value.select.return_value.order.return_value.range.return_value
        query.execute.return_value.data = [create_mock_todo_data(2, "B"), create_mock_todo_data(1, "A")]
        query.execute.return_value.count = 12
        repo = TodoRepository(mock_db)

        page = repo.find_all_order_by_modified_desc(PageRequest(page=1, size=10))

        assert [todo.title for todo in page.content] == ["B", "A"]
        assert page.page == 2
        assert page.total_elements == 12
        mock_db.table.return_value.select.return_value.order.assert_called_once_with(
            "modified_at", desc=True
        )
        mock_db.table.return_value.select.return_value.order.return_value.range.assert_called_once_with(10, 19)

    def test_find_by_id_with_user(self):
        """Should map the embedded owner."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_mock_todo_data()
        ]
        repo = TodoRepository(mock_db)

        todo = repo.find_by_id_with_user(1)

        assert todo.user.email == "test@test.com"
        assert todo.user.user_role is UserRole.USER

    def test_find_by_id_with_user_not_found(self):
        """Should return None when no row matches."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        repo = TodoRepository(mock_db)

        assert repo.find_by_id_with_user(999) is None
