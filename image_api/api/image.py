"""
Purpose:
- /api/image: pick a random term, fetch one image from Google, enforce the
  source allow-list, return it as JSON.
"""

import logging
from fastapi import APIRouter, Depends, Request
from ..core.exceptions import (
    ConfigurationError,
    MethodNotAllowed,
    SearchError,
    SourceNotAllowed,
    UpstreamError,
)
from ..core.settings import Settings
from ..search.google_cse import GoogleImageSearch
from ..search.schema import ImageResponse
from ..search.vocabulary import QueryPicker
from ..search.whitelist import is_allowed_source
from .deps import get_picker, get_search_client, get_settings, require_bearer
from .routing import AnyMethodRoute

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["image"], route_class=AnyMethodRoute)


@router.api_route(
    "/api/image",
    methods=["GET"],
    response_model=ImageResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(require_bearer)],
)
def random_image(
    request: Request,
    cfg: Settings = Depends(get_settings),
    picker: QueryPicker = Depends(get_picker),
    search: GoogleImageSearch = Depends(get_search_client),
):
    if request.method != "GET":
        raise MethodNotAllowed()

    query = picker.pick()

    if not cfg.google_api_key or not cfg.google_search_engine_id:
        raise ConfigurationError("Google API credentials not configured")

    try:
        hit = search.search_image(query, cfg.google_api_key, cfg.google_search_engine_id)
    except SearchError as e:
        logger.error("Error searching for image: %s", e)
        raise UpstreamError(f"Error searching for image: {e}") from e

    if not is_allowed_source(hit.source, search.allowed_sources):
        logger.warning("Image from disallowed source: %s (query=%r)", hit.source, query)
        raise SourceNotAllowed(f"No images found from allowed sources for query: {query}")

    return ImageResponse.from_hit(hit)
