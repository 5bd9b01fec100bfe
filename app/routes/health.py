"""
Boruto Api — Health Check Route
===============================

What:  Health check endpoint for monitoring and load balancer probes.
How:   The only dependency is the in-memory catalog, so the service is healthy
       as long as the catalog has heroes.
"""

import logging
import time

from fastapi import APIRouter, Depends

from app import __version__
from app.schemas.hero import HealthResponse
from app.services.hero_repository import HeroRepository, get_hero_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    repository: HeroRepository = Depends(get_hero_repository),
) -> HealthResponse:
    hero_count = len(repository.heroes)
    status = "healthy" if hero_count else "unhealthy"
    if not hero_count:
        logger.warning("Health check: hero catalog is empty")

    return HealthResponse(
        status=status,
        version=__version__,
        heroes=hero_count,
        pages=repository.page_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
