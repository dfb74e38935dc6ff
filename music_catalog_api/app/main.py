"""
Main entrypoint for the Music Catalog API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers and CORS middleware, and includes the
versioned routers.  ``create_app`` builds and configures the app,
which is instantiated at import time as ``app`` so it can be served
directly::

    uvicorn music_catalog_api.app.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Make sure the catalog tables exist before the first request.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
