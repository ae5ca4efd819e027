"""Tests for shared/repository.py."""

from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_first_returns_first_row(self):
        """_first should return the first row of a result."""
        result = MagicMock()
        result.data = [{"id": 1}, {"id": 2}]
        assert BaseRepository._first(result) == {"id": 1}

    def test_first_returns_none_for_empty_result(self):
        """_first should return None when nothing matched."""
        result = MagicMock()
        result.data = []
        assert BaseRepository._first(result) is None

    def test_find_one_queries_own_table(self):
        """_find_one should filter the subclass table by the given column."""

        class WidgetRepository(BaseRepository[dict]):
            TABLE = "widgets"

        mock_db = MagicMock()
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.data = [{"id": 3}]

        row = WidgetRepository(mock_db)._find_one("id", 3, columns="id")

        assert row == {"id": 3}
        mock_db.table.assert_called_once_with("widgets")
        mock_db.table.return_value.select.assert_called_once_with("id")
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("id", 3)
