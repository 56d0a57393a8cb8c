"""Services package for the URL shortener."""

from .links import LinkService, get_service

__all__ = ["LinkService", "get_service"]
