"""
Boruto Api — Application Package Initializer
============================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The API is a thin layered service over a static hero catalog:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Pagination/Search)  │  ← Pure functions over the catalog
    ├─────────────────────────────────────┤
    │     Schemas & Data (Hero catalog)   │  ← Pydantic models + fixture data
    └─────────────────────────────────────┘

    There is no persistence layer: the catalog is built once at import time
    and shared read-only by every request.
"""

__version__ = "1.0.0"
