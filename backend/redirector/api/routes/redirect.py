"""Redirect Handler: answers every request with a redirect to the configured target.

Invariants:
    - Bound to every path ("/{path:path}" also matches "/") for every HTTP method,
      including WebDAV and extension methods (no method list, so never 405)
    - Request body, headers, and query string are never read
    - Query string is not carried over to the Location header
    - No state: the target is read from app.state on each request, never mutated

Design Decisions:
    - Plain Starlette Route with methods=None instead of an APIRouter route:
      FastAPI routes always carry a method set, Starlette's match any method
    - Registered on the app directly by register_redirect_route(), mirroring
      register_error_handlers(); include_router would rebuild the method set
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from redirector.core.errors import RedirectNotConfiguredError
from redirector.core.redirect_target import RedirectTarget

logger = logging.getLogger(__name__)

REDIRECT_PATH = "/{path:path}"


def register_redirect_route(app: FastAPI) -> None:
    """Bind the catch-all redirect to every path and method of the app."""
    app.add_route(
        REDIRECT_PATH, redirect_to_index,
        methods=None, name="redirect_to_index", include_in_schema=False,
    )


def get_redirect_target(request: Request) -> RedirectTarget:
    """Resolve the app-wide redirect target or raise 500."""
    target = getattr(request.app.state, "redirect_target", None)
    if target is None:
        raise RedirectNotConfiguredError()
    return target


async def redirect_to_index(request: Request) -> RedirectResponse:
    target = get_redirect_target(request)
    logger.debug(
        "Redirecting request",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": target.status_code,
            "location": target.location,
        },
    )
    return RedirectResponse(url=target.location, status_code=target.status_code)
