"""
Purpose:
- FastAPI application factory and router mounts.
- Wires settings, the query picker and the Google client onto app.state.
- Uvicorn serves this on settings.host:settings.port (0.0.0.0:8080 by default).
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from .core.exceptions import install_exception_handlers
from .core.settings import Settings, settings as default_settings
from .search.google_cse import GoogleImageSearch
from .search.vocabulary import QueryPicker
from .api.image import router as image_router
from .api.root import router as root_router

request_logger = logging.getLogger("app.requests")

def create_app(
    settings: Optional[Settings] = None,
    picker: Optional[QueryPicker] = None,
    search_client: Optional[GoogleImageSearch] = None,
) -> FastAPI:
    cfg = settings or default_settings
    if search_client is None:
        search_client = GoogleImageSearch(
            allowed_sources=cfg.resolved_allow_list(),
            endpoint=cfg.google_endpoint,
            timeout_s=cfg.google_timeout_s,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.search_client.close()

    # docs off: the catch-all route owns every path besides /api/image
    app = FastAPI(
        title="Random Image API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = cfg
    app.state.picker = picker or QueryPicker()
    app.state.search_client = search_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_credentials=False,  # bearer header auth, no cookies
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000
        request_logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, duration_ms)
        return response

    install_exception_handlers(app)
    # order matters: root_router ends with the catch-all
    app.include_router(image_router)
    app.include_router(root_router)
    return app


app = create_app()


def serve() -> None:
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("uvicorn.error").info("Server starting on port %s", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_level=default_settings.log_level.lower())
