"""
Todos module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from modules.users.models import User, UserResponse


class Todo(BaseModel):
    """
    A todo item.

    ``weather`` is captured once when the todo is created and never
    refreshed afterwards.
    """

    id: Optional[int] = None
    title: str
    contents: str
    weather: str
    user: User
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class TodoSaveRequest(BaseModel):
    """Request to create a todo."""

    title: str = Field(..., min_length=1, max_length=255)
    contents: str = Field(..., min_length=1)


class TodoSaveResponse(BaseModel):
    """The persisted todo, as returned on creation."""

    id: int
    title: str
    contents: str
    weather: str
    user: UserResponse


class TodoListItem(BaseModel):
    """Todo summary used in listings; owner is referenced by ID only."""

    id: int
    title: str
    contents: str
    weather: str
    user_id: int
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class TodoResponse(BaseModel):
    """Full todo with its owner."""

    id: int
    title: str
    contents: str
    weather: str
    user: UserResponse
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
