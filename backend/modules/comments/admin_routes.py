"""
Admin comment endpoints.

Mounted under the admin prefix, so only ADMIN callers get here.
Every call is audited.
"""

from fastapi import APIRouter, Depends, Request

from api.audit import admin_request_context, audit_admin_call
from api.dependencies import get_comment_admin_service

from .interfaces import ICommentAdminService

router = APIRouter()


@router.delete("/comments/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: int,
    request: Request,
    service: ICommentAdminService = Depends(get_comment_admin_service),
) -> None:
    """Delete any comment."""
    await audit_admin_call(
        admin_request_context(request),
        lambda: service.delete_comment(comment_id),
    )
