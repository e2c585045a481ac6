"""Error Hierarchy — typed, categorized exceptions for todo-graph failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - "Not found" is never an error: get/toggle/delete report absence as a normal result
    - to_response() produces REST envelope; to_graphql_extensions() produces the
      `extensions` map of a GraphQL error entry
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoGraphError base: FastAPI global handler and the
      operation dispatch both catch the base class (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    UNKNOWN_OPERATION = "unknown_operation"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    todo_id: str | None = None
    debug_info: dict[str, Any] | None = None


class TodoGraphError(Exception):
    """Base exception for all todo-graph errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.details,
                "context": {
                    "operation": self.context.operation,
                    "todo_id": self.context.todo_id,
                },
            }
        }

    def to_graphql_extensions(self) -> dict:
        """Convert to the `extensions` map of a GraphQL error entry."""
        extensions = {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.details:
            extensions["details"] = self.details
        return extensions


# ─── Domain Errors (400-level) ──────────────────────────────────

class TitleValidationError(TodoGraphError):
    """Todo title rejected (empty, whitespace-only, or too long)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
            details=[{"field": "title", "message": message}],
        )


class ArgumentValidationError(TodoGraphError):
    """Operation arguments failed to parse."""
    def __init__(
        self, operation: str, details: list[dict],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Invalid arguments for '{operation}'",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400, details=details,
        )


class UnknownOperationError(TodoGraphError):
    """Operation name has no registered handler."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Operation '{operation}' does not exist.",
            "UNKNOWN_OPERATION", ErrorCategory.UNKNOWN_OPERATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(TodoGraphError):
    """Task store was not initialized for this process."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Task store is not available",
            "STORE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
