"""
Todo API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_todo_service
from shared.models import AuthenticatedUser, Page

from .interfaces import ITodoService
from .models import TodoSaveRequest, TodoSaveResponse, TodoListItem, TodoResponse

router = APIRouter()


@router.post("", response_model=TodoSaveResponse, status_code=201)
async def save_todo(
    request: TodoSaveRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoSaveResponse:
    """
    Create a todo owned by the current user.

    Today's weather is captured at creation time.
    """
    return await service.save_todo(user, request)


@router.get("", response_model=Page[TodoListItem])
async def get_todos(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    size: int = Query(default=10, ge=1, le=100, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> Page[TodoListItem]:
    """List todos, most recently modified first."""
    return await service.get_todos(page, size)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Get a single todo with its owner."""
    return await service.get_todo(todo_id)
