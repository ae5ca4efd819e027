"""
Todos module exceptions.
"""

from shared.exceptions import ExternalServiceError, NotFoundError


class TodoNotFoundError(NotFoundError):
    """Raised when a todo is not found."""

    def __init__(self, todo_id: int):
        super().__init__(
            "Todo not found",
            code="TODO_NOT_FOUND",
            details={"todo_id": todo_id},
        )


class WeatherFetchError(ExternalServiceError):
    """Raised when today's weather cannot be obtained."""

    def __init__(self, message: str):
        super().__init__(message, service="weather", code="WEATHER_UNAVAILABLE")
