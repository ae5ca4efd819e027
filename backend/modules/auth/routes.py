"""
Auth API endpoints.

Public endpoints; JwtAuthMiddleware lets them through without a token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import SignupRequest, SigninRequest, SignupResponse, SigninResponse

router = APIRouter()


@router.post("/signup", response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SignupResponse:
    """Register an account and return its bearer token."""
    return await service.signup(request)


@router.post("/signin", response_model=SigninResponse)
async def signin(
    request: SigninRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SigninResponse:
    """Exchange email and password for a bearer token."""
    return await service.signin(request)
