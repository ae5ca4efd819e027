"""
Audit logging for privileged admin operations.

Exactly two operations are audited: comment deletion and user role
change. Their routes call ``audit_admin_call`` explicitly with the
request context and the payload to record. Every call produces one
request line and then either one response line or one error line.
"""

import logging
import time
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
NOT_AVAILABLE = "Not Available"
NULL_BODY = "null"

# Scalars carry no request body worth recording.
_SIMPLE_TYPES = (str, bytes, int, float, bool)


class AdminRequestContext(BaseModel):
    """Caller and path of the request being audited."""

    user_id: Optional[int] = None
    uri: str

    model_config = {"frozen": True}


def admin_request_context(request: Optional[Request]) -> Optional[AdminRequestContext]:
    """Build the audit context from request state set by the JWT middleware."""
    if request is None:
        return None
    return AdminRequestContext(
        user_id=getattr(request.state, "user_id", None),
        uri=request.url.path,
    )


async def audit_admin_call(
    context: Optional[AdminRequestContext],
    operation: Callable[[], Awaitable[T]],
    request_body: Any = None,
) -> T:
    """
    Run an admin operation with request/response audit logging.

    Args:
        context: Caller and path; when None the operation runs unaudited
        operation: Zero-argument coroutine factory performing the work
        request_body: Payload to record in the request line

    Returns:
        Whatever the operation returns

    Raises:
        Any exception from the operation, unchanged
    """
    if context is None:
        logger.warning("Request context unavailable, running admin operation without audit")
        return await operation()

    request_time = datetime.now().strftime(TIME_FORMAT)
    serialized_request = _serialize_request_body(request_body)

    logger.info(
        f"[ADMIN_API_REQUEST] userId={context.user_id}, uri={context.uri}, "
        f"time={request_time}, requestBody={serialized_request}",
        extra={
            "audit_event": "request",
            "user_id": context.user_id,
            "uri": context.uri,
            "request_time": request_time,
            "request_body": serialized_request,
        },
    )

    start = time.perf_counter()
    try:
        result = await operation()
    except Exception as e:
        execution_time_ms = _elapsed_ms(start)
        logger.error(
            f"[ADMIN_API_ERROR] userId={context.user_id}, uri={context.uri}, "
            f"executionTime={execution_time_ms}ms, error={e}",
            extra={
                "audit_event": "error",
                "user_id": context.user_id,
                "uri": context.uri,
                "execution_time_ms": execution_time_ms,
                "error_message": str(e),
            },
        )
        raise

    execution_time_ms = _elapsed_ms(start)
    serialized_response = _serialize_response_body(result)
    logger.info(
        f"[ADMIN_API_RESPONSE] userId={context.user_id}, uri={context.uri}, "
        f"executionTime={execution_time_ms}ms, responseBody={serialized_response}",
        extra={
            "audit_event": "response",
            "user_id": context.user_id,
            "uri": context.uri,
            "execution_time_ms": execution_time_ms,
            "response_body": serialized_response,
        },
    )
    return result


def _serialize_request_body(body: Any) -> str:
    if body is None or isinstance(body, _SIMPLE_TYPES):
        return NOT_AVAILABLE
    return _to_json(body)


def _serialize_response_body(result: Any) -> str:
    if result is None:
        return NULL_BODY
    return _to_json(result)


def _to_json(value: Any) -> str:
    try:
        return to_json(value).decode()
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.warning(f"Could not serialize audit payload: {e}")
        return NOT_AVAILABLE


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
