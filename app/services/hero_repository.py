"""
Boruto Api — Hero Repository (Pagination & Search)
==================================================

What:  Resolves page requests and name searches against the hero catalog.
How:   Pure methods over an immutable tuple of pages. Invalid input raises
       the application exceptions from app.exceptions; the global handlers
       turn those into failure envelopes.
Who:   Called by the heroes route handlers through `get_hero_repository`.

Request Flow (GET /boruto/heroes?page=2):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │  Route   │───▶│ parse_page  │───▶│ get_all_     │───▶│ Envelope │
    │ (raw str)│    │ (400 check) │    │ heroes (404) │    │ (200)    │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘
"""

import logging
import re
from typing import Dict, Optional, Sequence, Tuple

from app.data.heroes import PAGES
from app.exceptions import InvalidPageFormatError, PageOutOfRangeError
from app.schemas.hero import ApiResponse, Hero

logger = logging.getLogger(__name__)

PREVIOUS_PAGE_KEY = "prevPage"
NEXT_PAGE_KEY = "nextPage"

DEFAULT_PAGE = 1

_INTEGER_RE = re.compile(r"[+-]?\d+")

# Page numbers are signed 32-bit integers; wider values are a format error
PAGE_MIN = -(2 ** 31)
PAGE_MAX = 2 ** 31 - 1


def parse_page(raw: Optional[str]) -> int:
    """
    Parse the raw `page` query value.

    A missing parameter means the first page. Anything that is not a plain
    (optionally signed) decimal integer is rejected, including the empty
    string, surrounding whitespace and decimals like "1.5". Integers outside
    the signed 32-bit range are rejected the same way.

    Raises:
        InvalidPageFormatError: The value is not a 32-bit integer
    """
    if raw is None:
        return DEFAULT_PAGE
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidPageFormatError(raw_page=raw)
    try:
        page = int(raw)
    except ValueError as exc:
        # More digits than the interpreter will convert
        raise InvalidPageFormatError(raw_page=raw) from exc
    if not PAGE_MIN <= page <= PAGE_MAX:
        raise InvalidPageFormatError(raw_page=raw)
    return page


def calculate_page(page: int, page_count: int) -> Dict[str, Optional[int]]:
    """
    Neighbour pages of `page` within [1, page_count].

    Returns:
        {"prevPage": page - 1 or None, "nextPage": page + 1 or None}
    """
    prev_page = page - 1 if page > 1 else None
    next_page = page + 1 if page < page_count else None
    return {PREVIOUS_PAGE_KEY: prev_page, NEXT_PAGE_KEY: next_page}


class HeroRepository:
    """
    Read-only access to a paginated hero catalog.

    Responsibilities:
        - get_all_heroes(): One page plus its prev/next links
        - search_heroes(): Case-insensitive name search over every page

    Stateless beyond the pages it was built with; safe to share across
    concurrent requests without locking.
    """

    def __init__(self, pages: Sequence[Sequence[Hero]] = PAGES):
        self._pages: Tuple[Tuple[Hero, ...], ...] = tuple(tuple(p) for p in pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def heroes(self) -> Tuple[Hero, ...]:
        """Every hero, pages concatenated in order."""
        return tuple(hero for page in self._pages for hero in page)

    def page(self, page: int) -> Tuple[Hero, ...]:
        """Heroes assigned to a 1-based page number."""
        self._check_range(page)
        return self._pages[page - 1]

    def get_all_heroes(self, page: int = DEFAULT_PAGE) -> ApiResponse:
        """
        Resolve one catalog page.

        Args:
            page: 1-based page number

        Returns:
            Success envelope with the page's heroes and its neighbour pages

        Raises:
            PageOutOfRangeError: page is not within 1..page_count
        """
        heroes = self.page(page)
        links = calculate_page(page, self.page_count)
        return ApiResponse(
            success=True,
            message="ok",
            prev_page=links[PREVIOUS_PAGE_KEY],
            next_page=links[NEXT_PAGE_KEY],
            heroes=list(heroes),
        )

    def search_heroes(self, name: str) -> ApiResponse:
        """
        Find heroes whose name contains `name`, ignoring case.

        An empty query returns the whole catalog. Results are never paginated
        and an unmatched query is an empty success, not an error.
        """
        return ApiResponse(
            success=True,
            message="ok",
            heroes=list(self._find_heroes(name)),
        )

    def _find_heroes(self, query: str) -> Tuple[Hero, ...]:
        if not query:
            return self.heroes
        needle = query.casefold()
        matches = tuple(hero for hero in self.heroes if needle in hero.name.casefold())
        logger.debug("Search %r matched %d heroes", query, len(matches))
        return matches

    def _check_range(self, page: int) -> None:
        if not 1 <= page <= self.page_count:
            raise PageOutOfRangeError(page=page, page_count=self.page_count)


# Singleton instance shared by every request
hero_repository = HeroRepository()


def get_hero_repository() -> HeroRepository:
    """FastAPI dependency providing the process-wide catalog."""
    return hero_repository
