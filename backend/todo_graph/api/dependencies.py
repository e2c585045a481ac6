"""Request Dependencies — hand the process-wide task store to every request.

Invariants:
    - Exactly one TodoStore per process, created by the lifespan hook in main.py
      and held on app.state.todo_store
    - Every GraphQL request gets a fresh TodoContext wrapping a dispatch over
      that same store (the dispatch itself is stateless)
    - A missing store raises StoreUnavailableError (503), never builds a new one

Design Decisions:
    - FastAPI Depends over module global: tests swap the store through
      app.dependency_overrides[get_store]
"""

from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from todo_graph.config import Settings, get_settings
from todo_graph.core.errors import StoreUnavailableError
from todo_graph.core.todo_store import TodoStore
from todo_graph.services.operation_dispatch import OperationDispatch


class TodoContext(BaseContext):
    """GraphQL execution context: the operation dispatch for this request."""

    def __init__(self, dispatch: OperationDispatch):
        super().__init__()
        self.dispatch = dispatch


def get_store(request: Request) -> TodoStore:
    store = getattr(request.app.state, "todo_store", None)
    if store is None:
        raise StoreUnavailableError()
    return store


async def get_context(
    store: TodoStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> TodoContext:
    """Strawberry context_getter — resolved by FastAPI per request."""
    return TodoContext(OperationDispatch(store, settings.max_title_length))
