"""Operation Dispatch — explicit routing from operation name to handler.

Invariants:
    - Every operation->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown operations return UNKNOWN_OPERATION error result (never raises)
    - Arguments parsed by a per-operation pydantic model before the handler runs;
      bad arguments return VALIDATION_ERROR error result (never raises)
    - Every call logged with the operation name; failures add error_code

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Handlers split by group (QueryHandlers / MutationHandlers), both sharing
      the one store reference handed in by the shell
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from todo_graph.core.domain_types import OperationName
from todo_graph.core.enforce_title import DEFAULT_MAX_TITLE_LENGTH
from todo_graph.core.errors import ArgumentValidationError, UnknownOperationError
from todo_graph.core.operation_result import OperationResult
from todo_graph.core.repository_protocols import TodoRepository
from todo_graph.schemas.todo import CreateTodoArgs, NoArgs, TodoIdArgs
from todo_graph.services.handle_mutations import MutationHandlers
from todo_graph.services.handle_queries import QueryHandlers

logger = logging.getLogger(__name__)


class OperationDispatch:
    """Routes operation name -> (argument model, handler). Explicit registration."""

    def __init__(
        self, store: TodoRepository,
        max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
    ):
        queries = QueryHandlers(store)
        mutations = MutationHandlers(store, max_title_length)

        # adding an operation requires editing this dict
        self._handlers: dict[
            OperationName, tuple[type[BaseModel], Callable[[Any], OperationResult]],
        ] = {
            # Read group
            OperationName.TODOS: (NoArgs, queries.todos),
            OperationName.TODO: (TodoIdArgs, queries.todo),

            # Write group
            OperationName.CREATE_TODO: (CreateTodoArgs, mutations.create_todo),
            OperationName.TOGGLE_TODO: (TodoIdArgs, mutations.toggle_todo),
            OperationName.DELETE_TODO: (TodoIdArgs, mutations.delete_todo),
        }

    @property
    def operations(self) -> frozenset[str]:
        return frozenset(op.value for op in self._handlers)

    def execute(
        self, operation: str, args: dict | None = None,
    ) -> OperationResult:
        """Route operation to handler. Returns a tagged result. Logs every call."""
        try:
            name = OperationName(operation)
        except ValueError:
            result = OperationResult.fail(UnknownOperationError(str(operation)))
            self._log_operation(operation, result)
            return result

        args_model, handler = self._handlers[name]
        try:
            parsed = args_model.model_validate(args or {})
        except ValidationError as e:
            result = OperationResult.fail(
                ArgumentValidationError(operation, _validation_details(e)),
            )
            self._log_operation(operation, result)
            return result

        result = handler(parsed)
        self._log_operation(operation, result)
        return result

    def _log_operation(self, operation: str, result: OperationResult) -> None:
        if result.is_ok:
            group = OperationName(operation).group
            logger.info(
                f"{group.value} operation '{operation}' ok",
                extra={"operation": operation},
            )
            return
        logger.warning(
            f"Operation '{operation}' failed: {result.error.message}",
            extra={"operation": operation, "error_code": result.error.code},
        )


def _validation_details(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
