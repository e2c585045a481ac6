"""Task Store — the single lock-guarded, in-memory owner of every Todo.

Invariants:
    - One threading.Lock guards the collection; every operation, reads included,
      holds it end to end (at most one operation in flight at any instant)
    - No IO inside the critical section: hold time bounded by a linear scan
    - Ids are str(uuid4()), assigned once at creation, unique among live todos
    - Insertion order preserved; deletion is permanent (no tombstones)
    - Callers only receive frozen Todo copies, never the stored records

Design Decisions:
    - Lock over actor/queue: sync resolvers and worker threads both call in
      directly, no event loop required
    - Records kept as a list of small mutable dicts: toggle flips in place,
      listing order falls out of the list for free
    - Not-found returns None/False: absence is a normal result, not an error
"""

import logging
import threading
import uuid
from typing import Iterable

from todo_graph.core.domain_types import Todo, TodoId

logger = logging.getLogger(__name__)


class TodoStore:
    """Serialized list/get/create/toggle/delete over an in-memory collection."""

    def __init__(self, seed_titles: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._records: list[dict] = []
        for title in seed_titles:
            self.create(title)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> list[Todo]:
        """Snapshot of all todos in insertion order."""
        with self._lock:
            return [_snapshot(r) for r in self._records]

    def get(self, todo_id: str) -> Todo | None:
        with self._lock:
            record = self._find(todo_id)
            return _snapshot(record) if record is not None else None

    def create(self, title: str) -> Todo:
        """Append a new, not-completed todo with a fresh id."""
        record = {
            "id": TodoId(str(uuid.uuid4())),
            "title": title,
            "completed": False,
        }
        with self._lock:
            self._records.append(record)
            todo = _snapshot(record)
        logger.debug("Todo created", extra={"todo_id": todo.id})
        return todo

    def toggle(self, todo_id: str) -> Todo | None:
        """Flip `completed` in place. None when no todo has this id."""
        with self._lock:
            record = self._find(todo_id)
            if record is None:
                return None
            record["completed"] = not record["completed"]
            todo = _snapshot(record)
        logger.debug(
            f"Todo toggled (completed={todo.completed})",
            extra={"todo_id": todo_id},
        )
        return todo

    def delete(self, todo_id: str) -> bool:
        """Remove the todo. True only if something was removed."""
        with self._lock:
            before = len(self._records)
            self._records = [r for r in self._records if r["id"] != todo_id]
            removed = len(self._records) != before
        if removed:
            logger.debug("Todo deleted", extra={"todo_id": todo_id})
        return removed

    def _find(self, todo_id: str) -> dict | None:
        # caller holds self._lock
        for record in self._records:
            if record["id"] == todo_id:
                return record
        return None


def _snapshot(record: dict) -> Todo:
    return Todo(
        id=record["id"], title=record["title"], completed=record["completed"],
    )
