"""Root conftest — shared test configuration and store fixtures."""

import os

import pytest

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SEED_TITLES", '["Buy milk"]')

from todo_graph.core.todo_store import TodoStore  # noqa: E402
from todo_graph.services.operation_dispatch import OperationDispatch  # noqa: E402


@pytest.fixture
def store():
    """Fresh store seeded the way the app seeds it."""
    return TodoStore(["Buy milk"])


@pytest.fixture
def empty_store():
    return TodoStore()


@pytest.fixture
def dispatch(store):
    return OperationDispatch(store)


@pytest.fixture
def milk(store):
    """The seeded "Buy milk" todo."""
    return store.list()[0]
