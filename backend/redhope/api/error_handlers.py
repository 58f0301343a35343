"""Error Handlers: global exception handlers for the RedHope API.

Invariants:
    - RedHopeError → structured JSON with error code, message, severity
    - RequestValidationError → 400; each detail names the request location
      (body, query, path) and the camelCase wire field separately
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (RedHopeError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from redhope.core.errors import RedHopeError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_redhope_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_redhope_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RedHopeError)
    async def redhope_error_handler(request: Request, exc: RedHopeError):
        """Handle all RedHope domain/collaborator errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"RedHopeError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

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

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "location": e["loc"][0] if e["loc"] else None,
                    "field": ".".join(str(part) for part in e["loc"][1:]) or None,
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
