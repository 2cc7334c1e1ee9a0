"""
Error types and the handlers that turn them into plain-text HTTP responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ServiceError(Exception):
    """Base for errors that map straight onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ServiceError):
    """A secret or credential the route needs was not configured."""

    status_code = 500


class AuthError(ServiceError):
    status_code = 401


class MethodNotAllowed(ServiceError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class SourceNotAllowed(ServiceError):
    """The provider answered, but with an image from outside the allow-list."""

    status_code = 404


class UpstreamError(ServiceError):
    status_code = 500


# --- search client failures (raised below the HTTP layer) ---

class SearchError(Exception):
    """Anything that went wrong talking to the image-search provider."""


class RequestFailed(SearchError):
    pass


class UpstreamTimeout(SearchError):
    pass


class BadStatus(SearchError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned status {status_code}: {body}")


class DecodeFailed(SearchError):
    pass


class NoImagesFound(SearchError):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"no images found for query: {query}")


async def _service_error_handler(request: Request, exc: ServiceError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
