"""
Purpose:
- Query the Google Custom Search JSON API for ONE image.
- Restrict the search to the allow-list via siteSearch (all domains in one call).
- Normalize the first hit into an ImageHit.

Notes:
- Requires an API key and a search engine id (cx); the HTTP layer checks them.
- Exactly one request per call. No retries, no paging.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from .schema import ImageHit
from .whitelist import build_site_filter, extract_domain
from ..core.exceptions import (
    BadStatus,
    DecodeFailed,
    NoImagesFound,
    RequestFailed,
    UpstreamTimeout,
)

GOOGLE_ENDPOINT = "https://www.googleapis.com/customsearch/v1"

logger = logging.getLogger("uvicorn.error")

# --- provider response shape (only the fields we read) ---

class _CseImage(BaseModel):
    thumbnailLink: str = ""

class _CseItem(BaseModel):
    title: str = ""
    link: str = ""
    displayLink: str = ""
    image: Optional[_CseImage] = None

class _CseResponse(BaseModel):
    items: Optional[List[Optional[_CseItem]]] = None

# a literal null body decodes to "no items", not an error
_decode_response = TypeAdapter(Optional[_CseResponse]).validate_json

def _api_params(query: str, api_key: str, cx: str, allowed: Sequence[str]) -> Dict[str, str]:
    params = {
        "key": api_key,
        "cx": cx,
        "q": query,
        "searchType": "image",
        "num": "1",
        "safe": "active",
    }
    site_filter = build_site_filter(allowed)
    if site_filter:
        params["siteSearch"] = site_filter
        params["siteSearchFilter"] = "i"  # include only these sites
    return params

class GoogleImageSearch:
    """
    Thin wrapper around one httpx.Client.
    Pass `client` to reuse a pool or to plug in a mock transport.
    """

    def __init__(
        self,
        allowed_sources: Sequence[str],
        client: Optional[httpx.Client] = None,
        endpoint: str = GOOGLE_ENDPOINT,
        timeout_s: float = 10.0,
    ):
        self.allowed_sources = list(allowed_sources)
        self.endpoint = endpoint
        self.timeout_s = timeout_s
        self._client = client or httpx.Client()

    def close(self) -> None:
        self._client.close()

    def search_image(self, query: str, api_key: str, cx: str) -> ImageHit:
        params = _api_params(query, api_key, cx, self.allowed_sources)
        logger.info("image-search request q=%r sites=%r", query, params.get("siteSearch", ""))

        try:
            r = self._client.get(self.endpoint, params=params, timeout=self.timeout_s)
        except httpx.TimeoutException as e:
            logger.warning("image-search timeout q=%r after %.1fs", query, self.timeout_s)
            raise UpstreamTimeout(f"upstream timeout after {self.timeout_s:g}s: {e}") from e
        except httpx.HTTPError as e:
            raise RequestFailed(f"failed to make request: {e}") from e

        if r.status_code != httpx.codes.OK:
            logger.warning("image-search status=%s body=%s", r.status_code, r.text)
            raise BadStatus(r.status_code, r.text)

        try:
            data = _decode_response(r.content)
        except ValidationError as e:
            raise DecodeFailed(f"failed to decode response: {e}") from e

        if data is None or not data.items:
            raise NoImagesFound(query)

        # num=1, so only the first item is ever looked at
        item = data.items[0] or _CseItem()
        return ImageHit(
            query=query,
            image_url=item.link,
            title=item.title,
            thumbnail=item.image.thumbnailLink if item.image else "",
            source=extract_domain(item.displayLink),
        )
