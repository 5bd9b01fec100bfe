"""
Boruto Api — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│  Logging    │→│  GZip / CORS     │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌────────────────┐ ┌───────────────────┐  │
    │  │ GET /│ │ /boruto/heroes │ │ GET /health       │  │
    │  └──────┘ └────────────────┘ └───────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Format→400 │ Range→404 │ No route→404 text   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Error formats:
    The heroes routes answer failures with the JSON envelope
    ({"success": false, "message": ..., "heroes": []}). Unmatched routes answer
    404 with the plain-text body "Page not found". Existing clients depend on
    both formats, so the difference is kept.
    Trailing slashes are not stripped: "/boruto/heroes/" is an unmatched route.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import BorutoApiError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import health, heroes, root
from app.schemas.hero import ApiResponse
from app.services.hero_repository import hero_repository

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = "Page not found"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once during app startup, before anything else logs.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report the loaded catalog.
    Shutdown: nothing to release, the catalog lives until process exit.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info(
        "Hero catalog loaded: %d heroes on %d pages",
        len(hero_repository.heroes),
        hero_repository.page_count,
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        BorutoApiError subclasses  → exc.status_code + failure envelope
        HTTPException 404          → 404 plain text "Page not found"
        HTTPException (other)      → FastAPI default JSON
        Exception (fallback)       → 500 failure envelope
    """

    @app.exception_handler(BorutoApiError)
    async def handle_api_error(request: Request, exc: BorutoApiError):
        """Invalid page format or page out of range."""
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse.failure(exc.message).to_json(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Unmatched routes get plain text, not the envelope."""
        if exc.status_code == 404:
            return PlainTextResponse(PAGE_NOT_FOUND, status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ApiResponse.failure("An unexpected error occurred").to_json(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Read-only catalog of Boruto heroes, paginated in five fixed pages "
            "and searchable by name."
        ),
        version=__version__,
        lifespan=lifespan,
        # "/boruto/heroes/" is an unknown path, not a redirect to "/boruto/heroes"
        redirect_slashes=False,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(heroes.router)
    app.include_router(health.router)

    # Hero images, when the image directory is deployed alongside the app
    static_root = Path(settings.static_root)
    if static_root.is_dir():
        app.mount("/images", StaticFiles(directory=static_root), name="images")
        logger.info("Serving hero images from %s", static_root.resolve())

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
