"""
Boruto Api — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── repository: HeroRepository over the real fixture catalog
    ├── small_repository: HeroRepository over a hand-built two-page catalog
    └── test_client: HTTPX AsyncClient wired to the FastAPI app (no server)
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

from app.data.heroes import PAGES  # noqa: E402
from app.schemas.hero import Hero  # noqa: E402
from app.services.hero_repository import HeroRepository  # noqa: E402


def make_hero(hero_id: int, name: str) -> Hero:
    """Minimal valid Hero for hand-built catalogs."""
    return Hero(
        id=hero_id,
        name=name,
        image=f"/images/{name.lower()}.jpg",
        about=f"About {name}",
        rating=4.0,
        power=50,
        month="Jan",
        day="1st",
    )


@pytest.fixture
def repository() -> HeroRepository:
    """HeroRepository over the shipped five-page catalog."""
    return HeroRepository(PAGES)


@pytest.fixture
def small_repository() -> HeroRepository:
    """
    Two pages of two heroes each.

    Used to check that page arithmetic follows the catalog it was built with
    rather than a hardcoded page count.
    """
    return HeroRepository(
        [
            [make_hero(1, "Alpha"), make_hero(2, "Beta")],
            [make_hero(3, "Gamma"), make_hero(4, "alphabet")],
        ]
    )


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
