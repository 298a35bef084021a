"""
Main entrypoint for the Intern Portal API.

This module assembles the FastAPI application: logging, CORS, the
``/api`` routes, the exception handlers that turn failures into JSON
error payloads, and the record store lifecycle.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app`` so it can be served directly::

    uvicorn intern_portal_api.app.main:app --reload

The record store connects in a background task started at startup, so
the static endpoints answer immediately even when the database is slow
or down; status-check requests made before the connection is up get
HTTP 503.  The store is closed when the application shuts down.
"""

import asyncio
import contextlib
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import RecordStore, create_record_store
from .core.errors import PortalError, RouteNotFound
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _describe_validation_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def create_app(store: Optional[RecordStore] = None, config: Settings = settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Record store backing the status-check endpoints.  When omitted
        the backend selected by ``config.record_store`` is created.
    config : Settings
        Application settings; defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so the store factory
    # below can log which backend it picked.
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)

    record_store = store if store is not None else create_record_store(config)
    app.state.record_store = record_store
    app.state.store_connect_task = None

    if "*" in config.cors_origins:
        logger.warning("CORS is open to any origin; set CORS_ORIGINS to restrict it")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(PortalError)
    async def handle_portal_error(request: Request, exc: PortalError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.detail, exc_info=exc
            )
        elif exc.status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = "; ".join(_describe_validation_error(error) for error in exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body", "message": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and known paths with an unsupported method are
        # both reported as missing routes.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return await handle_portal_error(
                request, RouteNotFound(f"{request.method} {request.url.path}")
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something went wrong!"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Connect in the background; until the task finishes the store
        # reports itself as not connected.
        app.state.store_connect_task = asyncio.create_task(record_store.connect())

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Shutting down server...")
        task = app.state.store_connect_task
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await record_store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
