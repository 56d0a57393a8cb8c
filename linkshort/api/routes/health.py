"""Health check API routes."""

from fastapi import APIRouter, Depends

from ...schemas.link import HealthResponse
from ...services.links import LinkService, get_service

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(service: LinkService = Depends(get_service)) -> dict:
    """Health check endpoint.

    Returns:
        Health status and how many links are held in memory.
    """
    return {"status": "healthy", "links": len(service.registry)}
