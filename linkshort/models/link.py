"""Pydantic models for the URL shortener."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ShortLink(BaseModel):
    """A stored destination URL and the instant it stops resolving."""

    model_config = ConfigDict(frozen=True)

    destination_url: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """A link is still valid at exactly its expiry instant."""
        return now > self.expires_at


class CreatedLink(BaseModel):
    """A link that was just stored, with its public short URL."""

    short_code: str
    short_url: str
    link: ShortLink


class ResolutionState(str, Enum):
    """What visiting a short code leads to."""

    REDIRECTING = "redirecting"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"


class Resolution(BaseModel):
    """Outcome of looking up a short code."""

    short_code: str
    state: ResolutionState
    destination_url: Optional[str] = None
    redirect_delay_ms: Optional[int] = None


class LinkStats(BaseModel):
    """A registry entry as shown in the listing."""

    short_code: str
    destination_url: str
    expires_at: datetime
    remaining_minutes: int


class ShortenRequest(BaseModel):
    """Model for creating a short URL."""

    original_url: str = Field(..., description="The original long URL to shorten")
    custom_code: Optional[str] = Field(None, description="Custom short code")
    validity: Optional[Union[int, float, str]] = Field(
        None, description="Validity in minutes, defaults to 30"
    )


class ErrorResponse(BaseModel):
    """Model for error responses."""

    detail: str
    error_code: Optional[str] = None
