"""API package for the URL shortener."""

from .routes import health_router, links_router

__all__ = ["health_router", "links_router"]
