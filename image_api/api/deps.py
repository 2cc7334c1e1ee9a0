"""
Purpose:
- Request-scoped dependencies: settings, query picker, search client, bearer auth.
- Everything is read off app.state, which create_app() fills in once.
"""

import logging
from typing import Optional
from fastapi import Header, Request
from ..core.exceptions import AuthError, ConfigurationError
from ..core.settings import Settings
from ..search.google_cse import GoogleImageSearch
from ..search.vocabulary import QueryPicker

logger = logging.getLogger("uvicorn.error")

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_picker(request: Request) -> QueryPicker:
    return request.app.state.picker

def get_search_client(request: Request) -> GoogleImageSearch:
    return request.app.state.search_client

def require_bearer(request: Request, authorization: Optional[str] = Header(default=None)) -> None:
    """
    Gate for protected routes. Expects exactly "Bearer <token>".
    An unset server secret closes the route for everyone (500).
    """
    secret = get_settings(request).api_key
    if not secret:
        raise ConfigurationError("API key not configured on server")

    if not authorization:
        logger.info("auth: missing header path=%s", request.url.path)
        raise AuthError("Authorization header required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        logger.info("auth: bad header format path=%s", request.url.path)
        raise AuthError("Invalid authorization header format. Use: Bearer <token>")

    if parts[1] != secret:
        logger.info("auth: invalid key path=%s", request.url.path)
        raise AuthError("Invalid API key")
