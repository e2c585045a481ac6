"""Structured Logging — JSON formatter fields and setup_logging behavior.

Tests:
    - JSON output carries level, logger, message and known extras only
    - Exceptions are rendered into the `exception` field
    - setup_logging replaces its own handler instead of stacking another
"""

import json
import logging
import sys

import pytest

from todo_graph.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "todo_graph.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_basic_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "todo_graph.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(operation="create_todo", todo_id="abc", secret="nope"),
    ))
    assert log["operation"] == "create_todo"
    assert log["todo_id"] == "abc"
    assert "secret" not in log


def test_json_formatter_renders_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_setup_logging_does_not_stack_handlers(restore_root_logger):
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert isinstance(first.formatter, JSONFormatter)
    assert not isinstance(second.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
