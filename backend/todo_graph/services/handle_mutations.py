"""Mutation Handlers — the write group: create_todo, toggle_todo, delete_todo.

Invariants:
    - Every handler returns an OperationResult, never raises TodoGraphError
    - toggle_todo on an unknown id: ok result carrying None
    - delete_todo on an unknown id: ok result carrying False
    - create_todo stores the stripped title; empty or over-long titles
      come back as a VALIDATION_ERROR failure

Design Decisions:
    - Title rule lives in core/enforce_title.py (pure); the handler only
      turns its exception into a failed result
"""

from todo_graph.core.domain_types import Todo
from todo_graph.core.enforce_title import DEFAULT_MAX_TITLE_LENGTH, normalize_title
from todo_graph.core.errors import TodoGraphError
from todo_graph.core.operation_result import OperationResult
from todo_graph.core.repository_protocols import TodoRepository
from todo_graph.schemas.todo import CreateTodoArgs, TodoIdArgs


class MutationHandlers:
    """Write handlers over the task store."""

    def __init__(
        self, store: TodoRepository,
        max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
    ):
        self._store = store
        self._max_title_length = max_title_length

    def create_todo(self, args: CreateTodoArgs) -> OperationResult[Todo]:
        try:
            title = normalize_title(args.title, self._max_title_length)
        except TodoGraphError as e:
            return OperationResult.fail(e)
        return OperationResult.ok(self._store.create(title))

    def toggle_todo(self, args: TodoIdArgs) -> OperationResult[Todo | None]:
        return OperationResult.ok(self._store.toggle(args.id))

    def delete_todo(self, args: TodoIdArgs) -> OperationResult[bool]:
        return OperationResult.ok(self._store.delete(args.id))
