"""
User API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UserResponse, UserChangePasswordRequest

router = APIRouter()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Get a user's public profile."""
    return await service.get_user(user_id)


@router.put("", status_code=204)
async def change_password(
    request: UserChangePasswordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> None:
    """Change the current user's password."""
    await service.change_password(user.id, request)
