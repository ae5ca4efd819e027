"""
Admin user endpoints.

Mounted under the admin prefix, so only ADMIN callers get here.
Every call is audited.
"""

from fastapi import APIRouter, Depends, Request

from api.audit import admin_request_context, audit_admin_call
from api.dependencies import get_user_admin_service

from .interfaces import IUserAdminService
from .models import UserRoleChangeRequest

router = APIRouter()


@router.patch("/users/{user_id}", status_code=204)
async def change_user_role(
    user_id: int,
    body: UserRoleChangeRequest,
    request: Request,
    service: IUserAdminService = Depends(get_user_admin_service),
) -> None:
    """Change a user's role."""
    await audit_admin_call(
        admin_request_context(request),
        lambda: service.change_user_role(user_id, body),
        request_body=body,
    )
