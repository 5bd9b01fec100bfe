"""
Boruto Api — Request Logging Middleware
=======================================

What:  One access-log line per HTTP request on the `boruto.access` logger.
How:   Times the rest of the chain and logs method, path with query string,
       status, duration, request ID and client IP. The query string carries
       `page` and `name`, which decide what the heroes routes answer, so it is
       part of the line (capped at MAX_QUERY_LENGTH).

Log level follows the status code:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Example:
    GET /boruto/heroes?page=6 404 0.4ms [3f2a9c1d] from 127.0.0.1

Health checks are not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("boruto.access")

SKIPPED_PATHS = frozenset({"/health"})

MAX_QUERY_LENGTH = 200


def status_log_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def format_target(request: Request) -> str:
    """Path plus query string, with an oversized query truncated."""
    query = request.url.query
    if not query:
        return request.url.path
    if len(query) > MAX_QUERY_LENGTH:
        query = query[:MAX_QUERY_LENGTH] + "..."
    return f"{request.url.path}?{query}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access-log line for every non-health request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        target = format_target(request)
        rid = request_id_var.get("")
        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        status = response.status_code

        logger.log(
            status_log_level(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            target,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "query": dict(request.query_params),
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
