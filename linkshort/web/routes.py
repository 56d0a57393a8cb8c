"""Web interface routes implementation."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..api.routes.links import RESOLUTION_STATUS, get_base_url
from ..core.exceptions import ShortenerError
from ..models.link import ResolutionState
from ..services.links import LinkService, get_service

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _render_home(request: Request, status_code: int = 200, **context) -> HTMLResponse:
    form = {"original_url": "", "custom_code": "", "validity": ""}
    form.update(context.pop("form", {}))
    return templates.TemplateResponse(
        request,
        "home.html",
        {"form": form, "short_url": None, "error": None, **context},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the shortening form."""
    return _render_home(request)


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def shorten_web(
    request: Request,
    original_url: str = Form(""),
    custom_code: str = Form(""),
    validity: str = Form(""),
    service: LinkService = Depends(get_service),
):
    """Handle form submission to create short URL."""
    form = {
        "original_url": original_url,
        "custom_code": custom_code,
        "validity": validity,
    }
    try:
        created = service.shorten(
            original_url,
            custom_code or None,
            validity,
            base_url=get_base_url(request),
        )
    except ShortenerError as e:
        return _render_home(request, e.status_code, form=form, error=e.message)

    return _render_home(request, 201, form=form, short_url=created.short_url)


@router.get("/stats", response_class=HTMLResponse, include_in_schema=False)
async def stats_page(request: Request, service: LinkService = Depends(get_service)):
    """Show every stored link and the minutes it has left."""
    return templates.TemplateResponse(
        request, "stats.html", {"links": service.list_links()}
    )


@router.get("/{short_code}", response_class=HTMLResponse, include_in_schema=False)
async def redirect_page(
    short_code: str,
    request: Request,
    service: LinkService = Depends(get_service),
):
    """Resolve a short code.

    A live link gets a page that navigates to the destination after the
    configured delay; the refresh timer belongs to that page alone, so
    opening another short code never inherits it.
    """
    resolution = service.resolve(short_code)
    delay_seconds = None
    if resolution.state is ResolutionState.REDIRECTING:
        delay_seconds = "{:g}".format(resolution.redirect_delay_ms / 1000)

    return templates.TemplateResponse(
        request,
        "redirect.html",
        {"resolution": resolution, "delay_seconds": delay_seconds},
        status_code=RESOLUTION_STATUS[resolution.state],
    )
