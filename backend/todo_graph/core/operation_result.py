"""Operation Result — tagged success/error value returned by every operation.

Invariants:
    - Exactly one of value/error is meaningful: status "ok" carries value
      (which may itself be None or False), status "error" carries a TodoGraphError
    - A "not found" outcome is always status "ok"
    - to_dict() mirrors the envelope used in logs: {"status": "ok", "data": ...}
      or {"status": "error", "error_code": ..., "message": ..., "details": [...]}

Design Decisions:
    - Result value over exceptions at the dispatch seam: one failing operation
      never aborts sibling operations in the same GraphQL document
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from todo_graph.core.domain_types import Todo
from todo_graph.core.errors import TodoGraphError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    status: Literal["ok", "error"]
    value: T | None = None
    error: TodoGraphError | None = None

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        return cls(status="ok", value=value)

    @classmethod
    def fail(cls, error: TodoGraphError) -> "OperationResult[T]":
        return cls(status="error", error=error)

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict:
        if self.is_ok:
            return {"status": "ok", "data": _plain(self.value)}
        return {
            "status": "error",
            "error_code": self.error.code,
            "message": self.error.message,
            "details": self.error.details,
        }


def _plain(value: Any) -> Any:
    if isinstance(value, Todo):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
