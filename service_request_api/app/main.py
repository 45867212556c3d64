"""
Main entrypoint for the Service Request API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn service_request_api.app.main:app --reload
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


def _static_path() -> Path:
    static_dir = Path(settings.static_dir)
    if static_dir.is_absolute():
        return static_dir
    return Path(__file__).resolve().parent.parent.parent / static_dir


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, CORS, security headers, per-request logging,
    the 400 handler for malformed requests, the API routes and, when
    present, the static booking form.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Malformed bodies and query strings are reported as 400, not 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request.", "errors": jsonable_errors(exc)},
        )

    app.include_router(v1_router, prefix=settings.api_prefix)

    # Mounted last so API routes take precedence over static files.
    static_path = _static_path()
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="static")
        logger.info("Serving static files from %s", static_path)
    else:
        logger.debug("Static directory %s not found; frontend not served", static_path)

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Return the validation errors in a JSON-serialisable form."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
