"""Models package for the URL shortener."""

from .link import (
    ShortLink,
    CreatedLink,
    ResolutionState,
    Resolution,
    LinkStats,
    ShortenRequest,
    ErrorResponse,
)

__all__ = [
    "ShortLink",
    "CreatedLink",
    "ResolutionState",
    "Resolution",
    "LinkStats",
    "ShortenRequest",
    "ErrorResponse",
]
