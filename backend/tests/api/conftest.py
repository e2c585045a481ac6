"""API test fixtures — FastAPI test client wired to a per-test store.

Invariants:
    - Every test gets a fresh seeded TodoStore
    - get_store dependency overridden; app.state left untouched
    - Lifespan is not run by ASGITransport: logging and app.state stay as they are

Design Decisions:
    - Override get_store rather than app.state: same path tests and production
      take through get_context
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_graph.api.dependencies import get_store
from todo_graph.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """Client with no store: neither override nor app.state.todo_store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def app_state_store(store):
    """Install the store on app.state as the lifespan hook would."""
    app.state.todo_store = store
    yield store
    del app.state.todo_store

