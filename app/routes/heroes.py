"""
Boruto Api — Heroes Route Handlers
==================================

What:  Handles GET /boruto/heroes (paginated catalog) and
       GET /boruto/heroes/search (name search).
How:   Reads query parameters, delegates to HeroRepository, returns the
       envelope serialized with camelCase keys and without null page links.

Failure mapping (raised by the service, answered by main.py handlers):
    ?page=invalid  → 400 {"success": false, "message": "Only numbers allowed", "heroes": []}
    ?page=6        → 404 {"success": false, "message": "Heroes not found", "heroes": []}
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.schemas.hero import ApiResponse
from app.services.hero_repository import (
    HeroRepository,
    get_hero_repository,
    parse_page,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Heroes"])


@router.get(
    "/heroes",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "One page of heroes", "model": ApiResponse},
        400: {"description": "Page is not a number", "model": ApiResponse},
        404: {"description": "Page outside the catalog", "model": ApiResponse},
    },
    summary="List heroes page by page",
    description=(
        "Returns one of the catalog's fixed pages together with the previous and "
        "next page numbers. Defaults to page 1."
    ),
)
async def get_all_heroes(
    page: Optional[str] = Query(
        default=None,
        description="Page number (1-based). Parsed here so non-numeric input maps to 400, not 422.",
    ),
    repository: HeroRepository = Depends(get_hero_repository),
) -> ApiResponse:
    page_number = parse_page(page)
    return repository.get_all_heroes(page=page_number)


@router.get(
    "/heroes/search",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Search heroes by name",
    description=(
        "Returns every hero whose name contains the query, ignoring case. "
        "An empty query returns the whole catalog. Results are not paginated."
    ),
)
async def search_heroes(
    name: str = Query(default="", description="Substring to look for in hero names"),
    repository: HeroRepository = Depends(get_hero_repository),
) -> ApiResponse:
    return repository.search_heroes(name=name)
