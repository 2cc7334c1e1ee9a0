"""
Purpose:
- Pydantic models for the image endpoint so the API is self-documenting and stable.
"""

from __future__ import annotations
from pydantic import BaseModel
from typing import Optional

class MessageResponse(BaseModel):
    message: str

class ImageHit(BaseModel):
    """First provider result, normalized. Lives for one request."""
    query: str
    image_url: str
    title: str = ""
    thumbnail: str = ""
    source: str = ""

class ImageResponse(BaseModel):
    query: str
    image_url: str
    # omitted from the JSON when empty
    title: Optional[str] = None
    thumbnail: Optional[str] = None

    @classmethod
    def from_hit(cls, hit: ImageHit) -> "ImageResponse":
        return cls(
            query=hit.query,
            image_url=hit.image_url,
            title=hit.title or None,
            thumbnail=hit.thumbnail or None,
        )
