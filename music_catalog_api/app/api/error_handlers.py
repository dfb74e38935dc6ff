"""
Global exception handlers.

Rejections raised by the services become ``{"error": message}`` bodies
with the status carried by the exception.  Store faults become a
``500`` with a generic message; the store's own text only goes to the
log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from music_catalog_api.app.core.errors import CatalogError, StoreFault

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the catalog error handlers on ``app``."""
    app.add_exception_handler(StoreFault, store_fault_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content={"error": exc.message})


async def store_fault_handler(request: Request, exc: StoreFault) -> JSONResponse:
    logger.error(
        "Store fault on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "A database error occurred"},
    )
