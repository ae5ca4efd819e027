"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    TaskdeskError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from modules.auth.exceptions import EmailAlreadyExistsError, WrongPasswordError
from modules.todos.exceptions import WeatherFetchError


class TestTaskdeskError:
    def test_message_and_default_code(self):
        """TaskdeskError should store message and default code to class name."""
        error = TaskdeskError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"
        assert error.code == "TaskdeskError"
        assert error.details == {}

    def test_to_dict(self):
        """TaskdeskError should convert to dict."""
        error = TaskdeskError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }

    @pytest.mark.parametrize(
        "error_class",
        [NotFoundError, ValidationError, AuthenticationError, AuthorizationError],
    )
    def test_subclasses_inherit_base(self, error_class):
        """Every error kind should be a TaskdeskError named after its class."""
        error = error_class("boom")
        assert isinstance(error, TaskdeskError)
        assert error.code == error_class.__name__


class TestExternalServiceError:
    def test_includes_service_in_details(self):
        """ExternalServiceError should record the service name."""
        error = ExternalServiceError("Connection failed", service="weather")
        assert error.service == "weather"
        assert error.to_dict()["details"]["service"] == "weather"

    def test_preserves_other_details(self):
        """ExternalServiceError should keep caller-supplied details."""
        error = ExternalServiceError(
            "Connection failed",
            service="weather",
            details={"status_code": 500},
        )
        assert error.details == {"status_code": 500, "service": "weather"}


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (TaskdeskError("boom"), 500),
            (NotFoundError("missing"), 404),
            (ValidationError("bad"), 400),
            (AuthenticationError("who"), 401),
            (AuthorizationError("no"), 403),
            (ExternalServiceError("down", service="weather"), 502),
        ],
    )
    def test_each_kind_carries_its_status(self, error, status_code):
        assert error.status_code == status_code

    def test_module_errors_inherit_status(self):
        """Concrete module errors answer with their base kind's status."""
        assert WrongPasswordError().status_code == 401
        assert EmailAlreadyExistsError("a@test.com").status_code == 400
        assert WeatherFetchError("No weather data").status_code == 502
