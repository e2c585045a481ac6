"""todo-graph API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoGraphError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - GET /graphiql exists only when the GraphiQL explorer is enabled
    - Task store created once on startup via lifespan and held on app.state;
      requests reach it only through api/dependencies.get_store

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - In-memory store: state is lost on restart (single-process uvicorn)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_graph.api.error_handlers import register_error_handlers
from todo_graph.api.routes import health
from todo_graph.api.routes.graphql import create_graphql_router, explorer_router
from todo_graph.config import Settings, get_settings
from todo_graph.core.todo_store import TodoStore
from todo_graph.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.todo_store = TodoStore(settings.seed_titles)
    logger.info(
        f"todo-graph API started with {len(app.state.todo_store)} seeded todo(s)",
    )
    yield
    logger.info("todo-graph API shutting down")


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI app: middleware, routers and error handlers."""
    app = FastAPI(
        title="todo-graph API", version="1.0.0", lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(create_graphql_router(settings.graphql_ide))
    if settings.graphql_ide:
        app.include_router(explorer_router)

    register_error_handlers(app)
    return app


app = create_app(get_settings())


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
