"""Error Handlers — global exception handlers for the User Registry API.

Invariants:
    - UserRegistryError → plain-text body with the error's own HTTP status
    - Exception (catch-all) → 500 plain text, never leaks internal details
    - Every error response produces exactly one log line

Design Decisions:
    - Two-layer handler: domain (UserRegistryError), catch-all (Exception)
    - Client errors log at WARNING, store errors at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.core.errors import UserRegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register User Registry domain/infrastructure error handler."""

    @app.exception_handler(UserRegistryError)
    async def user_registry_error_handler(request: Request, exc: UserRegistryError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
                "user_id": exc.context.user_id,
                "operation": exc.context.operation,
            },
        )
        return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
