import logging
from typing import Optional

from fastapi import APIRouter, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from url_details.config import settings
from url_details.models.response import ErrorResponse, UrlDetailsResponse
from url_details.services.handler import UrlDetailsHandler

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid `url` parameter."},
    403: {"model": ErrorResponse, "description": "Caller may not process remote URLs."},
    404: {"model": ErrorResponse, "description": "Remote URL unreachable or empty."},
}


@router.get(
    "/url-details",
    response_model=UrlDetailsResponse,
    responses=_ERROR_RESPONSES,
    summary="Fetch a remote URL and return its title",
)
@router.get(
    "/__experimental/url-details",
    response_model=UrlDetailsResponse,
    responses=_ERROR_RESPONSES,
    include_in_schema=False,
)
@limiter.limit(settings.rate_limit)
async def get_url_details(
    request: Request,
    url: Optional[str] = Query(default=None, description="The URL to process."),
) -> UrlDetailsResponse:
    """Fetch *url* and return the metadata extracted from its HTML.

    Validation is done by the handler rather than by FastAPI so that every
    failure uses the same ``{"code", "message"}`` error shape.
    """
    logger.info("URL details request received", extra={"url": url})
    handler: UrlDetailsHandler = request.app.state.url_details_handler
    metadata = await handler.handle(request, url)
    return UrlDetailsResponse(title=metadata.title)
