"""Boundary Protocols — contract between the operation handlers and the task store.

Invariants:
    - Handlers depend on TodoRepository, never on TodoStore directly
    - Every method is atomic on its own: no transaction spans two calls

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the store does no IO, so nothing to await
"""

from typing import Protocol

from todo_graph.core.domain_types import Todo


class TodoRepository(Protocol):
    """Contract for todo storage — implemented by TodoStore."""
    def list(self) -> list[Todo]: ...
    def get(self, todo_id: str) -> Todo | None: ...
    def create(self, title: str) -> Todo: ...
    def toggle(self, todo_id: str) -> Todo | None: ...
    def delete(self, todo_id: str) -> bool: ...
