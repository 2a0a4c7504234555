"""Error Hierarchy: typed, categorized exceptions for all Clientes API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) carry field-level details; server errors (500-level)
      never expose their cause: to_response() collapses them to INTERNAL_ERROR
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ClientesAPIError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

GENERIC_ERROR_MESSAGE = "A problem occurred handling your request."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    cliente_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ClientesAPIError(Exception):
    """Base exception for all Clientes API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_server_error(self) -> bool:
        return self.http_status >= 500

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        if self.is_server_error:
            return internal_error_response()
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


def internal_error_response() -> dict:
    """Opaque 500 body: identical for every server-side failure."""
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": GENERIC_ERROR_MESSAGE,
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }


def format_validation_errors(errors: list[dict]) -> list[dict]:
    """Flatten Pydantic error dicts into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


# ─── Caller Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ClientesAPIError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class PatchValidationError(ClientesAPIError):
    """Patched representation failed validation: nothing was persisted."""
    def __init__(
        self, details: list[dict], context: ErrorContext | None = None,
    ):
        super().__init__(
            "One or more validation errors occurred",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


# ─── Server Errors (500-level) ──────────────────────────────────

class PersistenceError(ClientesAPIError):
    """Commit to storage failed (constraint violation or connectivity loss)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class InternalServerError(ClientesAPIError):
    """Unexpected failure caught at a request handler boundary."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation} failed unexpectedly",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
