"""Error Handlers — global exception handlers for the GeoState API.

Invariants:
    - GeoStateError → its http_status with exc.to_response() as body
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (GeoStateError), validation (Pydantic), catch-all (Exception)
    - Caller errors logged at WARNING, dependency errors at ERROR
    - ErrorContext fields (state, abbreviation, provider_status) go to the log record as extras
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from geostate.core.errors import GeoStateError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_geostate_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_geostate_error_handler(app: FastAPI) -> None:
    """Register GeoState domain/infrastructure error handler."""

    @app.exception_handler(GeoStateError)
    async def geostate_error_handler(request: Request, exc: GeoStateError):
        """Handle all GeoState domain/infrastructure errors."""
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level,
            f"GeoStateError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
                **exc.context.to_log_extra(),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
