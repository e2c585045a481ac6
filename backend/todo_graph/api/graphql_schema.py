"""GraphQL Schema — strawberry types for the read group (Query) and write group (Mutation).

Invariants:
    - Every resolver goes through info.context.dispatch; none touches the store
    - Field names are camelCased by strawberry (create_todo -> createTodo)
    - Read group: todos is non-null; todo(id) is null when no such task
    - Write group fields are nullable: a failed OperationResult becomes one
      GraphQL error entry (code/category/severity in extensions) plus null for
      that field only, sibling fields in the same document still resolve
    - Not-found is never an error: toggleTodo -> null, deleteTodo -> false

Design Decisions:
    - Sync resolvers: the store does no IO, the lock is held for microseconds
    - GraphQLError raised from the failed result: graphql-core keeps its
      extensions when it attaches path/locations
"""

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from todo_graph.core import domain_types
from todo_graph.core.operation_result import OperationResult


@strawberry.type(name="Todo")
class TodoType:
    id: strawberry.ID
    title: str
    completed: bool

    @classmethod
    def from_domain(cls, todo: domain_types.Todo) -> "TodoType":
        return cls(
            id=strawberry.ID(todo.id), title=todo.title, completed=todo.completed,
        )


def _unwrap(result: OperationResult):
    """Return the ok value, or raise the failure as a GraphQL error."""
    if result.is_ok:
        return result.value
    raise GraphQLError(
        result.error.message, extensions=result.error.to_graphql_extensions(),
    )


def _maybe_todo(todo: domain_types.Todo | None) -> TodoType | None:
    return TodoType.from_domain(todo) if todo is not None else None


@strawberry.type
class Query:
    @strawberry.field(description="All todos in insertion order.")
    def todos(self, info: Info) -> list[TodoType]:
        todos = _unwrap(info.context.dispatch.execute("todos"))
        return [TodoType.from_domain(t) for t in todos]

    @strawberry.field(description="The todo with this id, or null.")
    def todo(self, info: Info, id: strawberry.ID) -> TodoType | None:
        result = info.context.dispatch.execute("todo", {"id": str(id)})
        return _maybe_todo(_unwrap(result))


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create a not-completed todo.")
    def create_todo(self, info: Info, title: str) -> TodoType | None:
        result = info.context.dispatch.execute("create_todo", {"title": title})
        return _maybe_todo(_unwrap(result))

    @strawberry.mutation(description="Flip completed; null when no such todo.")
    def toggle_todo(self, info: Info, id: strawberry.ID) -> TodoType | None:
        result = info.context.dispatch.execute("toggle_todo", {"id": str(id)})
        return _maybe_todo(_unwrap(result))

    @strawberry.mutation(description="Delete; false when no such todo.")
    def delete_todo(self, info: Info, id: strawberry.ID) -> bool | None:
        result = info.context.dispatch.execute("delete_todo", {"id": str(id)})
        return _unwrap(result)


schema = strawberry.Schema(query=Query, mutation=Mutation)
