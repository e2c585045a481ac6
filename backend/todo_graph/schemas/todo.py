"""Todo Schemas — Pydantic models for operation arguments.

Invariants:
    - TodoIdArgs.id: any string, the empty one included; an id that matches
      nothing is a not-found result downstream, never an argument error
    - CreateTodoArgs.title: string only; emptiness/length rules live in
      core/enforce_title.py so the limit can come from settings
    - Unknown argument keys are rejected

Design Decisions:
    - strict=True: no silent int -> str coercion of ids or titles
"""

from pydantic import BaseModel, ConfigDict


class TodoIdArgs(BaseModel):
    """Arguments of todo, toggle_todo, delete_todo."""
    model_config = ConfigDict(extra="forbid", strict=True)

    id: str


class CreateTodoArgs(BaseModel):
    """Arguments of create_todo."""
    model_config = ConfigDict(extra="forbid", strict=True)

    title: str


class NoArgs(BaseModel):
    """Arguments of todos (none)."""
    model_config = ConfigDict(extra="forbid")
