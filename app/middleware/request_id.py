"""
Boruto Api — Request ID Middleware
==================================

What:  Assigns an ID to each incoming request and returns it in `X-Request-ID`.
How:   Reuses a client-supplied `X-Request-ID` when it is printable, trimmed to
       MAX_REQUEST_ID_LENGTH, or generates a short UUID otherwise. The ID lives
       in a ContextVar for loggers and exception handlers and is echoed in the
       response headers.
When:  First middleware in the chain (runs before all other processing).
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client IDs end up in every log line of the request
MAX_REQUEST_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def sanitize_request_id(raw: Optional[str]) -> str:
    """
    Printable, length-capped form of a client-supplied request ID.

    Returns "" when nothing printable is left.
    """
    if not raw:
        return ""
    cleaned = "".join(ch for ch in raw if ch.isprintable()).strip()
    return cleaned[:MAX_REQUEST_ID_LENGTH]


def new_request_id() -> str:
    # 8 chars is enough for correlation and stays readable in logs
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID and echoes it back."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = sanitize_request_id(request.headers.get(REQUEST_ID_HEADER)) or new_request_id()
        request_id_var.set(rid)

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
