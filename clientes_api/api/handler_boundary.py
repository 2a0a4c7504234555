"""Handler Boundary: the single try/except every cliente route runs inside.

Invariants:
    - Caller errors (4xx ClientesAPIError, HTTPException) pass through untouched
    - Everything else (PersistenceError included) is logged at CRITICAL with the
      operation name and its input parameters, then re-raised as InternalServerError
    - Parameters are logged, never returned to the caller

Design Decisions:
    - Context manager over a decorator: keeps route signatures visible to FastAPI's
      dependency injection
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import HTTPException

from clientes_api.core.errors import (
    ClientesAPIError, ErrorContext, InternalServerError,
)

logger = logging.getLogger(__name__)


@contextmanager
def handler_boundary(operation: str, **parameters: Any) -> Iterator[None]:
    """Translate unexpected failures inside a route into an opaque 500."""
    try:
        yield
    except ClientesAPIError as e:
        if not e.is_server_error:
            raise
        _log_failure(operation, parameters, e)
        raise InternalServerError(operation, _context(parameters)) from e
    except HTTPException:
        raise
    except Exception as e:
        _log_failure(operation, parameters, e)
        raise InternalServerError(operation, _context(parameters)) from e


def _context(parameters: dict[str, Any]) -> ErrorContext:
    cliente_id = parameters.get("cliente_id")
    return ErrorContext(
        cliente_id=str(cliente_id) if cliente_id is not None else None,
        debug_info={k: str(v) for k, v in parameters.items()},
    )


def _log_failure(
    operation: str, parameters: dict[str, Any], exc: Exception,
) -> None:
    cliente_id = parameters.get("cliente_id")
    logger.critical(
        f"{operation}: exception handling cliente request with parameters: {parameters}",
        exc_info=exc,
        extra={
            "operation": operation,
            "cliente_id": str(cliente_id) if cliente_id is not None else None,
            "error_code": getattr(exc, "code", type(exc).__name__),
            "parameters": {k: str(v) for k, v in parameters.items()},
        },
    )
