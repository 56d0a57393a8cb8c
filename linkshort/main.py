"""URL Shortener - Main FastAPI Application.

An in-memory URL shortening service with:
- Short URLs with random or custom short codes
- Links that expire after a number of minutes
- Delayed redirect pages for live links
- A listing of every link and the time it has left
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import health_router, links_router
from .core.config import Settings, get_settings
from .core.exceptions import ShortenerError
from .core.registry import Clock, Registry
from .services.links import LinkService
from .web import web_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def reserved_segments(app: FastAPI) -> set[str]:
    """Single path segments answered by a fixed route rather than a short code."""
    segments = set()
    for route in app.routes:
        segment = getattr(route, "path", "").strip("/")
        if segment and "/" not in segment and "{" not in segment:
            segments.add(segment)
    return segments


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {app.state.settings.app_title}...")
    yield
    # Shutdown
    logger.info(
        f"Shutting down, discarding {len(app.state.registry)} in-memory links"
    )


async def shortener_error_handler(request: Request, exc: ShortenerError):
    """Render shortening failures as JSON errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.error(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": "500"},
    )


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Build the application and the registry it owns.

    Args:
        settings: Settings to use, the environment's if omitted.
        clock: Source of the current instant, UTC wall clock if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    logging.getLogger("linkshort").setLevel(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShortenerError, shortener_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers; the web router ends with the catch-all /{short_code}
    app.include_router(health_router)
    app.include_router(links_router)
    app.include_router(web_router)

    registry = Registry()
    app.state.settings = settings
    app.state.registry = registry
    app.state.service = LinkService(
        settings,
        registry=registry,
        clock=clock,
        reserved_codes=reserved_segments(app),
    )

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
