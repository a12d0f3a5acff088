"""Unified API response envelope.

Every endpoint (success or AppError) answers with:
{
    "code": 0,           // 0=success, non-0=AppError.code
    "message": "success",
    "data": ...,         // object, list, or null on error
    "timestamp": "...",
    "request_id": "..."  // same id RequestLogMiddleware logs
}
"""

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field
from starlette.requests import Request


def _new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    request_id: str = Field(default_factory=_new_request_id)


def request_id_of(request: Request) -> str:
    """Read request_id injected by RequestLogMiddleware, fresh one if absent."""
    return getattr(request.state, "request_id", None) or _new_request_id()


def success_response(
    data: Any = None,
    message: str = "success",
    request: Request | None = None,
) -> ApiResponse:
    resp = ApiResponse(code=0, message=message, data=data)
    if request is not None:
        resp.request_id = request_id_of(request)
    return resp


def error_response(
    code: int,
    message: str,
    request: Request | None = None,
) -> ApiResponse:
    resp = ApiResponse(code=code, message=message, data=None)
    if request is not None:
        resp.request_id = request_id_of(request)
    return resp
