"""Error Handlers: global exception handlers for the redirector API.

Invariants:
    - RedirectorError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details
    - Route handlers never catch transport errors themselves; they land here

Design Decisions:
    - Two-layer handler: domain (RedirectorError), catch-all (Exception)
    - No RequestValidationError layer: the redirect route declares no inputs
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from redirector.core.errors import RedirectorError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_redirector_error_handler(app)
    _register_generic_error_handler(app)


def _register_redirector_error_handler(app: FastAPI) -> None:
    """Register redirector domain/configuration error handler."""

    @app.exception_handler(RedirectorError)
    async def redirector_error_handler(request: Request, exc: RedirectorError):
        logger.error(
            f"RedirectorError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_internal_error_response(),
        )


def build_internal_error_response() -> dict:
    """Envelope for unexpected failures."""
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
