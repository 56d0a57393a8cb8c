"""Link API routes.

This module contains the JSON endpoints for link operations:
- Create short URL (POST /api/shorten)
- List all links with time left (GET /api/links)
- Resolve a short code (GET /api/links/{short_code})
"""

from fastapi import APIRouter, Depends, Request, Response

from ...models.link import ErrorResponse, ResolutionState, ShortenRequest
from ...schemas.link import (
    LinkInfoResponse,
    ResolutionResponse,
    ShortenResponse,
)
from ...services.links import LinkService, get_service
from ...utils.shortener import create_short_url

router = APIRouter(prefix="/api", tags=["Links"])

RESOLUTION_STATUS = {
    ResolutionState.REDIRECTING: 200,
    ResolutionState.NOT_FOUND: 404,
    ResolutionState.EXPIRED: 410,
}


def get_base_url(request: Request) -> str:
    """Get base URL from request.

    Args:
        request: FastAPI request object.

    Returns:
        Base URL string.
    """
    return str(request.base_url).rstrip("/")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=201,
    responses={
        201: {"description": "Short URL created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid URL or short code"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
    },
    summary="Create a short URL",
    description="Create a new short URL from a long URL. Optionally specify a custom code and validity in minutes.",
)
async def shorten_endpoint(
    request: Request,
    payload: ShortenRequest,
    service: LinkService = Depends(get_service),
) -> ShortenResponse:
    """Create a short URL from a long URL.

    Validation failures propagate as ShortenerError and are rendered by
    the application's exception handler.
    """
    created = service.shorten(
        payload.original_url,
        payload.custom_code,
        payload.validity,
        base_url=get_base_url(request),
    )
    return ShortenResponse(
        short_code=created.short_code,
        short_url=created.short_url,
        destination_url=created.link.destination_url,
        expires_at=created.link.expires_at,
    )


@router.get(
    "/links",
    response_model=list[LinkInfoResponse],
    summary="List all links",
    description="List every stored link with the whole minutes it has left.",
)
async def list_links(
    request: Request,
    service: LinkService = Depends(get_service),
) -> list[LinkInfoResponse]:
    """List all links, including expired ones nobody has visited yet."""
    base_url = service.settings.public_base_url or get_base_url(request)
    return [
        LinkInfoResponse(
            short_code=stats.short_code,
            short_url=create_short_url(base_url, stats.short_code),
            destination_url=stats.destination_url,
            expires_at=stats.expires_at,
            remaining_minutes=stats.remaining_minutes,
        )
        for stats in service.list_links()
    ]


@router.get(
    "/links/{short_code}",
    response_model=ResolutionResponse,
    responses={
        200: {"description": "Short code resolves to a destination"},
        404: {"model": ResolutionResponse, "description": "Short URL not found"},
        410: {"model": ResolutionResponse, "description": "Short URL expired"},
    },
    summary="Resolve a short code",
    description="Look up a short code. Expired links are removed when resolved.",
)
async def resolve_link(
    short_code: str,
    response: Response,
    service: LinkService = Depends(get_service),
) -> ResolutionResponse:
    """Resolve a short code without redirecting.

    Args:
        short_code: The short URL code.
        response: Outgoing response, its status follows the resolution state.
        service: Link service.

    Returns:
        Resolution state and destination.
    """
    resolution = service.resolve(short_code)
    response.status_code = RESOLUTION_STATUS[resolution.state]
    return ResolutionResponse(**resolution.model_dump())
