"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps the store-generated uuid4 string — never build one by hand
    - Todo is frozen: values handed out by the store can't mutate store state
    - Every externally invocable operation is listed in OperationName

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", str)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Todo:
    """A single task. Immutable snapshot of a store record."""
    id: TodoId
    title: str
    completed: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


# ─── Enums ───────────────────────────────────────────────────────

class OperationGroup(str, Enum):
    """Read group (queries) vs write group (mutations)."""
    READ = "read"
    WRITE = "write"


class OperationName(str, Enum):
    """The five operations exposed over GraphQL."""
    TODOS = "todos"
    TODO = "todo"
    CREATE_TODO = "create_todo"
    TOGGLE_TODO = "toggle_todo"
    DELETE_TODO = "delete_todo"

    @property
    def group(self) -> OperationGroup:
        if self in (OperationName.TODOS, OperationName.TODO):
            return OperationGroup.READ
        return OperationGroup.WRITE
