"""
Purpose:
- Unauthenticated welcome payload on "/" and on any path nothing else claims.
"""

from fastapi import APIRouter
from ..search.schema import MessageResponse
from .routing import AnyMethodRoute

router = APIRouter(tags=["root"], route_class=AnyMethodRoute)

WELCOME = MessageResponse(message="Welcome to the Go API")

@router.api_route("/", methods=["GET"], response_model=MessageResponse)
def root():
    return WELCOME

# Mount last: catches every unmatched path, like a "/" prefix route would.
@router.api_route("/{path:path}", methods=["GET"], response_model=MessageResponse, include_in_schema=False)
def catch_all(path: str):
    return WELCOME
