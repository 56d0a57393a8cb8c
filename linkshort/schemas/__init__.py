"""Schemas package for the URL shortener."""

from .link import (
    ShortenResponse,
    LinkInfoResponse,
    ResolutionResponse,
    HealthResponse,
)

__all__ = [
    "ShortenResponse",
    "LinkInfoResponse",
    "ResolutionResponse",
    "HealthResponse",
]
