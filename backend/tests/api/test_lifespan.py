"""Lifespan — startup builds the one seeded store that every request shares."""

import logging

import pytest

from todo_graph.core.todo_store import TodoStore
from todo_graph.main import app, lifespan


@pytest.fixture
def clean_app_state():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    if hasattr(app.state, "todo_store"):
        del app.state.todo_store
    logging.root.handlers = handlers
    logging.root.setLevel(level)


async def test_startup_seeds_store_from_settings(clean_app_state):
    async with lifespan(app):
        store = app.state.todo_store
        assert isinstance(store, TodoStore)
        assert [t.title for t in store.list()] == ["Buy milk"]
        assert store.list()[0].completed is False
