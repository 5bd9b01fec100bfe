"""
Boruto Api — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the two ways a hero request can fail.
How:   Each exception class carries a user-facing message and an optional
       context dict. Global exception handlers (registered in main.py) catch
       these and return the failure envelope with the matching status code.
Who:   Raised by the hero repository service; caught by global handlers.

Exception Hierarchy:
    BorutoApiError (base)
    ├── InvalidPageFormatError  → 400 Bad Request  ("Only numbers allowed")
    └── PageOutOfRangeError     → 404 Not Found    ("Heroes not found")

Both errors are detected synchronously while resolving a single request and
never propagate beyond it.
"""

from typing import Any, Dict, Optional


class BorutoApiError(Exception):
    """
    Base exception for all Boruto Api errors.

    Attributes:
        message:     User-facing error description (returned in the envelope)
        status_code: HTTP status the global handler responds with
        context:     Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidPageFormatError(BorutoApiError):
    """
    Raised when the `page` query parameter is not an integer.

    When:    GET /boruto/heroes?page=invalid
    HTTP:    400 Bad Request

    Checked before the range, so `?page=abc` is a 400 even though it is also
    "not a page".
    """

    status_code = 400

    def __init__(
        self,
        raw_page: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["page"] = raw_page
        super().__init__(message="Only numbers allowed", context=ctx)
        self.raw_page = raw_page


class PageOutOfRangeError(BorutoApiError):
    """
    Raised when the requested page is outside 1..page_count.

    When:    GET /boruto/heroes?page=6
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        page: int,
        page_count: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["page"] = page
        ctx["page_count"] = page_count
        super().__init__(message="Heroes not found", context=ctx)
        self.page = page
        self.page_count = page_count
