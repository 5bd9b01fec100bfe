"""
Boruto Api — Pydantic Response Schemas
======================================

What:  Pydantic models defining the API contract: a Hero record, the response
       envelope shared by the heroes and search endpoints, and the health report.
How:   FastAPI serializes these with `by_alias=True`, so clients see the
       camelCase keys (`prevPage`, `nextPage`, `natureTypes`) while Python code
       uses snake_case attributes.

Envelope invariant:
    success = false → heroes is [] and prevPage/nextPage are absent
    success = true  → heroes is the requested page or the search result;
                      a missing neighbour page is omitted, not sent as null
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Hero(BaseModel):
    """
    What:  One hero of the catalog.
    Who:   Built once from fixture data; never mutated afterwards (frozen).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Stable hero identifier (1-based, catalog order)")
    name: str = Field(description="Display name, matched by the search endpoint")
    image: str = Field(description="Path of the hero image, relative to the API root")
    about: str = Field(description="Short biography")
    rating: float = Field(ge=0, le=5, description="Fan rating from 0 to 5")
    power: int = Field(ge=0, le=100, description="Power stat from 0 to 100")
    month: str = Field(description="Birth month")
    day: str = Field(description="Birth day of month")
    family: List[str] = Field(default_factory=list)
    abilities: List[str] = Field(default_factory=list)
    nature_types: List[str] = Field(default_factory=list, alias="natureTypes")


class ApiResponse(BaseModel):
    """
    What:  Envelope returned by GET /boruto/heroes and GET /boruto/heroes/search.

    Fields:
        success:  Whether the request resolved to heroes
        message:  "ok" on success, the error text on failure
        prevPage: Previous page number, omitted on page 1 and on search
        nextPage: Next page number, omitted on the last page and on search
        heroes:   Page slice or search matches (empty on failure)
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: Optional[str] = None
    prev_page: Optional[int] = Field(default=None, alias="prevPage")
    next_page: Optional[int] = Field(default=None, alias="nextPage")
    heroes: List[Hero] = Field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> "ApiResponse":
        """Envelope for a rejected request: no heroes, no page links."""
        return cls(success=False, message=message)

    def to_json(self) -> dict:
        """JSON-ready dict with camelCase keys and absent (not null) page links."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """
    What:  Health check response for monitoring and load balancer probes.
    Who:   Returned by GET /health.
    """

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    heroes: int = Field(description="Number of heroes in the loaded catalog")
    pages: int = Field(description="Number of catalog pages")
    uptime_seconds: float = Field(description="Seconds since service started")
