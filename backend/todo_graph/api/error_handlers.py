"""Error Handlers — HTTP-level handlers for failures outside a GraphQL document.

Invariants:
    - Only errors raised before strawberry runs the document land here, i.e. in
      request dependencies (get_store, get_context); resolver failures are
      reported in the GraphQL `errors` list instead
    - TodoGraphError → its own http_status and to_response() envelope
    - Anything else → 500 INTERNAL_ERROR, exception logged, message never leaked

Design Decisions:
    - No RequestValidationError handler: no route declares FastAPI-validated
      parameters, strawberry parses its own request body
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from todo_graph.core.errors import ErrorCategory, ErrorSeverity, TodoGraphError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all handlers on the FastAPI app."""
    app.add_exception_handler(TodoGraphError, handle_todo_graph_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_todo_graph_error(
    request: Request, exc: TodoGraphError,
) -> JSONResponse:
    level = (
        logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
        else logging.WARNING
    )
    logger.log(
        level, f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_unexpected_error(
    request: Request, exc: Exception,
) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )
