"""Response schemas for the URL shortener."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..models.link import ResolutionState


class ShortenResponse(BaseModel):
    """Response model for created short URL."""

    short_code: str
    short_url: str
    destination_url: str
    expires_at: datetime


class LinkInfoResponse(BaseModel):
    """Response model for a listed link."""

    short_code: str
    short_url: str
    destination_url: str
    expires_at: datetime
    remaining_minutes: int


class ResolutionResponse(BaseModel):
    """Response model for resolving a short code."""

    short_code: str
    state: ResolutionState
    destination_url: Optional[str] = None
    redirect_delay_ms: Optional[int] = None


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    links: int
