"""Errors & Operation Result — verifies error envelopes and the tagged result.

Tests:
    - Every concrete error carries code, category, severity, http_status
    - to_response() REST envelope and to_graphql_extensions() shape
    - OperationResult.ok keeps None/False as successful values
    - OperationResult.to_dict() for ok and error results
"""

from todo_graph.core.domain_types import Todo, TodoId
from todo_graph.core.errors import (
    ArgumentValidationError, ErrorCategory, ErrorContext, ErrorSeverity,
    StoreUnavailableError, TitleValidationError, TodoGraphError,
    UnknownOperationError,
)
from todo_graph.core.operation_result import OperationResult


def test_title_validation_error_is_400():
    err = TitleValidationError("title cannot be empty or whitespace")
    assert isinstance(err, TodoGraphError)
    assert err.code == "VALIDATION_ERROR"
    assert err.category == ErrorCategory.VALIDATION
    assert err.http_status == 400


def test_unknown_operation_error_records_operation():
    err = UnknownOperationError("rename_todo")
    assert err.code == "UNKNOWN_OPERATION"
    assert err.context.operation == "rename_todo"
    assert "rename_todo" in err.message


def test_argument_validation_error_keeps_details():
    details = [{"field": "id", "message": "Field required", "type": "missing"}]
    err = ArgumentValidationError("todo", details)
    assert err.details == details
    assert err.context.operation == "todo"


def test_store_unavailable_is_critical_503():
    err = StoreUnavailableError()
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.http_status == 503


def test_to_response_envelope():
    err = TitleValidationError(
        "title cannot be empty or whitespace",
        context=ErrorContext(operation="create_todo"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"]["operation"] == "create_todo"
    assert "timestamp" in body


def test_graphql_extensions_omit_empty_details():
    assert StoreUnavailableError().to_graphql_extensions() == {
        "code": "STORE_UNAVAILABLE",
        "category": "unavailable",
        "severity": "critical",
    }
    ext = TitleValidationError("bad").to_graphql_extensions()
    assert ext["details"] == [{"field": "title", "message": "bad"}]


def test_ok_result_may_carry_none_or_false():
    assert OperationResult.ok(None).is_ok
    assert OperationResult.ok(False).is_ok
    assert OperationResult.ok(False).to_dict() == {"status": "ok", "data": False}


def test_ok_result_to_dict_converts_todos():
    todo = Todo(id=TodoId("abc"), title="Eggs")
    assert OperationResult.ok([todo]).to_dict() == {
        "status": "ok",
        "data": [{"id": "abc", "title": "Eggs", "completed": False}],
    }


def test_failed_result_to_dict():
    result = OperationResult.fail(UnknownOperationError("nope"))
    assert not result.is_ok
    assert result.value is None
    assert result.to_dict() == {
        "status": "error",
        "error_code": "UNKNOWN_OPERATION",
        "message": "Operation 'nope' does not exist.",
        "details": [],
    }
