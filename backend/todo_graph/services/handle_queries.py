"""Query Handlers — the read group: todos, todo(id).

Invariants:
    - Reads never fail: an unknown id is an ok result carrying None
    - Results are the store's copies, returned as-is
"""

from todo_graph.core.domain_types import Todo
from todo_graph.core.operation_result import OperationResult
from todo_graph.core.repository_protocols import TodoRepository
from todo_graph.schemas.todo import NoArgs, TodoIdArgs


class QueryHandlers:
    """Read-only handlers over the task store."""

    def __init__(self, store: TodoRepository):
        self._store = store

    def todos(self, args: NoArgs) -> OperationResult[list[Todo]]:
        return OperationResult.ok(self._store.list())

    def todo(self, args: TodoIdArgs) -> OperationResult[Todo | None]:
        return OperationResult.ok(self._store.get(args.id))
