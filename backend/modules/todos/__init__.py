"""
Todos module.

Handles todo creation (with a weather snapshot), listing and retrieval.
"""

from .interfaces import ITodoService, ITodoRepository, IWeatherClient
from .models import Todo, TodoSaveRequest, TodoSaveResponse, TodoListItem, TodoResponse
from .exceptions import TodoNotFoundError, WeatherFetchError

__all__ = [
    "ITodoService",
    "ITodoRepository",
    "IWeatherClient",
    "Todo",
    "TodoSaveRequest",
    "TodoSaveResponse",
    "TodoListItem",
    "TodoResponse",
    "TodoNotFoundError",
    "WeatherFetchError",
]
