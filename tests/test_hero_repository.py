"""
Boruto Api — Hero Repository Unit Tests
=======================================

What:  Tests for page parsing, prev/next arithmetic, page resolution and search.
How:   Calls the service directly (no HTTP).
"""

import pytest

from app.data.heroes import HEROES, PAGE_COUNT, PAGE_SIZE, PAGES
from app.exceptions import InvalidPageFormatError, PageOutOfRangeError
from app.services.hero_repository import (
    NEXT_PAGE_KEY,
    PREVIOUS_PAGE_KEY,
    calculate_page,
    get_hero_repository,
    hero_repository,
    parse_page,
)


class TestCatalog:
    """Tests for the fixture catalog layout."""

    def test_five_pages_of_three(self):
        """The catalog is split into five full pages."""
        assert PAGE_COUNT == 5
        assert all(len(page) == PAGE_SIZE for page in PAGES)
        assert len(HEROES) == 15

    def test_ids_follow_catalog_order(self):
        """Hero ids are 1..15 in page order."""
        assert [hero.id for hero in HEROES] == list(range(1, 16))

    def test_dependency_returns_singleton(self):
        """Every request sees the same catalog instance."""
        assert get_hero_repository() is hero_repository


class TestParsePage:
    """Tests for parse_page."""

    def test_missing_defaults_to_first_page(self):
        """No page parameter means page 1."""
        assert parse_page(None) == 1

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("5", 5), ("0", 0), ("-3", -3), ("+2", 2), ("42", 42)])
    def test_integers_parse(self, raw, expected):
        """Signed decimal integers parse even when out of range."""
        assert parse_page(raw) == expected

    @pytest.mark.parametrize("raw", ["invalid", "", " ", "1.5", " 2", "2 ", "1_0", "0x1", "two"])
    def test_non_integers_rejected(self, raw):
        """Anything that is not a plain integer is a format error."""
        with pytest.raises(InvalidPageFormatError, match="Only numbers allowed") as exc_info:
            parse_page(raw)
        assert exc_info.value.status_code == 400
        assert exc_info.value.context["page"] == raw

    @pytest.mark.parametrize("raw,expected", [("2147483647", 2 ** 31 - 1), ("-2147483648", -(2 ** 31))])
    def test_32_bit_bounds_parse(self, raw, expected):
        """The extremes of the signed 32-bit range are still integers."""
        assert parse_page(raw) == expected

    @pytest.mark.parametrize("raw", ["2147483648", "-2147483649", "99999999999", "9" * 5000])
    def test_oversized_integers_rejected(self, raw):
        """Digits that overflow a 32-bit page number are a format error, not a 404."""
        with pytest.raises(InvalidPageFormatError, match="Only numbers allowed"):
            parse_page(raw)


class TestCalculatePage:
    """Tests for prev/next page arithmetic."""

    def test_first_page_has_no_previous(self):
        links = calculate_page(1, 5)
        assert links[PREVIOUS_PAGE_KEY] is None
        assert links[NEXT_PAGE_KEY] == 2

    def test_last_page_has_no_next(self):
        links = calculate_page(5, 5)
        assert links[PREVIOUS_PAGE_KEY] == 4
        assert links[NEXT_PAGE_KEY] is None

    @pytest.mark.parametrize("page", [2, 3, 4])
    def test_middle_pages_have_both(self, page):
        links = calculate_page(page, 5)
        assert links == {PREVIOUS_PAGE_KEY: page - 1, NEXT_PAGE_KEY: page + 1}

    def test_single_page_catalog(self):
        """A one-page catalog links nowhere."""
        assert calculate_page(1, 1) == {PREVIOUS_PAGE_KEY: None, NEXT_PAGE_KEY: None}


class TestGetAllHeroes:
    """Tests for HeroRepository.get_all_heroes."""

    @pytest.mark.parametrize("page", range(1, 6))
    def test_each_page_returns_its_slice(self, repository, page):
        """Page N holds exactly the heroes assigned to it."""
        response = repository.get_all_heroes(page)

        assert response.success is True
        assert response.message == "ok"
        assert response.heroes == list(PAGES[page - 1])

    def test_default_is_first_page(self, repository):
        response = repository.get_all_heroes()
        assert [hero.name for hero in response.heroes] == ["Sasuke", "Naruto", "Sakura"]
        assert response.prev_page is None
        assert response.next_page == 2

    def test_last_page_links(self, repository):
        response = repository.get_all_heroes(5)
        assert response.prev_page == 4
        assert response.next_page is None

    @pytest.mark.parametrize("page", [0, -1, 6, 100])
    def test_out_of_range_raises(self, repository, page):
        """Pages outside 1..5 are not found."""
        with pytest.raises(PageOutOfRangeError, match="Heroes not found") as exc_info:
            repository.get_all_heroes(page)
        assert exc_info.value.status_code == 404
        assert exc_info.value.context == {"page": page, "page_count": 5}

    def test_page_count_follows_catalog(self, small_repository):
        """Range and links come from the catalog, not a fixed five."""
        assert small_repository.page_count == 2
        response = small_repository.get_all_heroes(2)
        assert response.prev_page == 1
        assert response.next_page is None
        with pytest.raises(PageOutOfRangeError):
            small_repository.get_all_heroes(3)


class TestSearchHeroes:
    """Tests for HeroRepository.search_heroes."""

    def test_single_match(self, repository):
        response = repository.search_heroes("sas")
        assert response.success is True
        assert [hero.name for hero in response.heroes] == ["Sasuke"]

    def test_multiple_matches_in_catalog_order(self, repository):
        response = repository.search_heroes("sa")
        assert [hero.name for hero in response.heroes] == ["Sasuke", "Sakura", "Sarada"]

    @pytest.mark.parametrize("query", ["SAS", "Sas", "sAs"])
    def test_case_insensitive(self, repository, query):
        assert len(repository.search_heroes(query).heroes) == 1

    def test_empty_query_returns_whole_catalog(self, repository):
        response = repository.search_heroes("")
        assert response.heroes == list(HEROES)

    def test_no_match_is_empty_success(self, repository):
        response = repository.search_heroes("unknown")
        assert response.success is True
        assert response.heroes == []

    def test_search_has_no_page_links(self, repository):
        response = repository.search_heroes("a")
        assert response.prev_page is None
        assert response.next_page is None

    def test_search_spans_pages(self, small_repository):
        """Matches come from every page, not only the first."""
        response = small_repository.search_heroes("ALPHA")
        assert [hero.id for hero in response.heroes] == [1, 4]
