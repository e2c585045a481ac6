"""GraphQL Endpoint — the single request/response cycle for both operation groups.

Invariants:
    - POST /graphql executes queries and mutations; GET /graphql executes
      queries and, when graphql_ide is on, serves the GraphiQL explorer
    - GET /graphiql redirects to the explorer at /graphql; main.create_app
      mounts explorer_router only when graphql_ide is on
    - Context built per request by get_context (store injected, never global)
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse
from strawberry.fastapi import GraphQLRouter

from todo_graph.api.dependencies import get_context
from todo_graph.api.graphql_schema import schema

GRAPHQL_PATH = "/graphql"

explorer_router = APIRouter(tags=["graphql"])


def create_graphql_router(graphql_ide: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        path=GRAPHQL_PATH,
        context_getter=get_context,
        graphql_ide="graphiql" if graphql_ide else None,
        tags=["graphql"],
    )


@explorer_router.get("/graphiql", include_in_schema=False)
async def graphiql() -> RedirectResponse:
    """Legacy explorer path."""
    return RedirectResponse(GRAPHQL_PATH)
