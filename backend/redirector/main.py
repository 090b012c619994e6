"""Index Redirector API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The redirect route accepts every HTTP method, so no request ends in 405
    - Global error handlers map RedirectorError → structured JSON responses
    - Redirect target validated once in create_app(); an invalid one aborts startup
    - OpenAPI/docs endpoints disabled: every path belongs to the redirect route
    - Logging configured on startup via lifespan context manager

Run with any ASGI server, e.g. ``uvicorn redirector.main:app``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from redirector.api.error_handlers import register_error_handlers
from redirector.api.routes.redirect import register_redirect_route
from redirector.config import Settings, get_settings
from redirector.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the redirector application from settings."""
    settings = settings or get_settings()
    target = settings.redirect_target()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            "Index Redirector started",
            extra={"status_code": target.status_code, "location": target.location},
        )
        yield
        logger.info("Index Redirector shutting down")

    app = FastAPI(
        title="Index Redirector",
        version="1.0.0",
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.redirect_target = target

    register_error_handlers(app)
    register_redirect_route(app)
    return app


app = create_app()
