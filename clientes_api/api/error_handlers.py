"""Error Handlers: global exception handlers for the Clientes API.

Invariants:
    - ClientesAPIError → structured JSON with error code, message, severity
      (5xx collapsed to the generic INTERNAL_ERROR body)
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ClientesAPIError), validation (Pydantic), catch-all (Exception)
    - Malformed input is a 400, not FastAPI's default 422: 422 is reserved for
      patch documents whose result fails validation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from clientes_api.core.errors import (
    ClientesAPIError,
    ErrorSeverity,
    format_validation_errors,
    internal_error_response,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_clientes_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_clientes_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ClientesAPIError)
    async def clientes_error_handler(request: Request, exc: ClientesAPIError):
        """Handle all Clientes API domain/infrastructure errors."""
        log = logger.error if exc.is_server_error else logger.info
        log(
            f"ClientesAPIError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": format_validation_errors(exc.errors()),
        },
    }
