"""
Boruto Api — Exception Tests
============================

What:  Tests for the status codes, messages and context of application errors.
"""

from app.exceptions import BorutoApiError, InvalidPageFormatError, PageOutOfRangeError


class TestExceptions:
    """Tests for the BorutoApiError hierarchy."""

    def test_status_codes(self):
        assert InvalidPageFormatError("x").status_code == 400
        assert PageOutOfRangeError(page=9, page_count=5).status_code == 404
        assert BorutoApiError().status_code == 500

    def test_messages(self):
        assert InvalidPageFormatError("x").message == "Only numbers allowed"
        assert PageOutOfRangeError(page=9, page_count=5).message == "Heroes not found"

    def test_caller_context_not_mutated(self):
        """The context dict passed in is copied, not filled in place."""
        shared = {"route": "/boruto/heroes"}

        format_error = InvalidPageFormatError(raw_page="abc", context=shared)
        range_error = PageOutOfRangeError(page=9, page_count=5, context=shared)

        assert shared == {"route": "/boruto/heroes"}
        assert format_error.context == {"route": "/boruto/heroes", "page": "abc"}
        assert range_error.context == {"route": "/boruto/heroes", "page": 9, "page_count": 5}
