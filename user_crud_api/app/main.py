"""
Main entrypoint for the User CRUD API.

This module assembles the FastAPI application, sets up logging,
installs the error mapping and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn, e.g.::

    uvicorn user_crud_api.app.main:app --port 8080

Every error response has the shape ``{"error": "<message>"}``.
"""

import logging
import time
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .services.user_service import SQLiteUserStore, UserStore


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map malformed path ids and bodies to 400.

    FastAPI reports these as 422; the API contract only distinguishes
    "bad input" and answers 400 with a single message.
    """
    errors = exc.errors()
    if any(error.get("loc") and error["loc"][0] == "path" for error in errors):
        message = "Invalid user id"
    else:
        message = "Invalid request body"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store the handlers will use.  When omitted, a
        ``SQLiteUserStore`` on the configured database is created and
        its schema is migrated at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so that the imports and setup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if store is None:
        database_path = get_database_path()
        store = SQLiteUserStore(database_path)

        @app.on_event("startup")
        async def startup_event() -> None:
            version = init_db(database_path)
            logger.info("Database %s at schema version %s", database_path, version)

    app.state.user_store = store

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        """Log one line per request and turn crashes into a 500."""
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
