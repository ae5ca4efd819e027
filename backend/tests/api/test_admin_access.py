"""
Tests for admin access logging middleware.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from api import app
from api.dependencies import get_comment_admin_service, get_todo_service
from api.middleware.admin_access import log_admin_access
from shared.models import Page
from modules.todos.models import TodoListItem

client = TestClient(app)

LOGGER_NAME = "api.middleware.admin_access"


def access_messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


@pytest.fixture(autouse=True)
def capture_access(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)


def test_log_admin_access_format(caplog):
    log_admin_access("/api/admin/comments/3", user_id=99, email="admin@test.com")

    messages = access_messages(caplog)
    assert len(messages) == 1
    assert messages[0].startswith(
        "[ADMIN_ACCESS] userId=99, email=admin@test.com, uri=/api/admin/comments/3, time="
    )


def test_admin_request_is_logged(caplog, admin_headers, override_dependency):
    override_dependency(get_comment_admin_service, AsyncMock())

    response = client.delete("/api/admin/comments/3", headers=admin_headers)

    assert response.status_code == 204
    messages = access_messages(caplog)
    assert len(messages) == 1
    assert "userId=99" in messages[0]
    assert "uri=/api/admin/comments/3" in messages[0]


def test_non_admin_path_not_logged(caplog, user_headers, override_dependency):
    service = override_dependency(get_todo_service, AsyncMock())
    service.get_todos.return_value = Page[TodoListItem](
        content=[], page=1, size=10, total_elements=0
    )

    client.get("/api/todos", headers=user_headers)

    assert access_messages(caplog) == []


def test_forbidden_request_not_logged(caplog, user_headers):
    """Rejected callers never reach access logging."""
    response = client.delete("/api/admin/comments/3", headers=user_headers)

    assert response.status_code == 403
    assert access_messages(caplog) == []
