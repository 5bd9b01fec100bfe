# Middleware package init
"""
Boruto Api — Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Correlation ID for every log line of the request
    2. Logging: One access-log line with status and duration
    3. GZip / CORS: Starlette built-ins

    Responses travel the chain in reverse, so the request ID header is set
    on the way out and the logged duration covers the whole handler.
"""
