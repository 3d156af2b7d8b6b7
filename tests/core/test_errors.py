"""Error Hierarchy — status codes, codes, and response envelopes."""

from dataclasses import fields

from taskdesk.core.errors import (
    ConflictError,
    ErrorContext,
    ErrorCategory,
    FieldValidationError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    StorageError,
    TaskDeskError,
    UnauthorizedError,
)


def test_unauthorized_maps_to_401():
    err = UnauthorizedError()
    assert err.http_status == 401
    assert err.code == "UNAUTHORIZED"
    assert err.category is ErrorCategory.AUTHENTICATION


def test_invalid_credentials_is_unauthorized():
    err = InvalidCredentialsError()
    assert isinstance(err, UnauthorizedError)
    assert err.code == "INVALID_CREDENTIALS"
    assert err.http_status == 401


def test_field_validation_error_carries_field_detail():
    body = FieldValidationError("Title is required", "title").to_response()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"] == [
        {"field": "title", "message": "Title is required"},
    ]


def test_storage_error_is_503_and_generic():
    err = StorageError("Integrity constraint violated", "commit")
    assert err.http_status == 503
    assert err.code == "STORAGE_ERROR"
    assert err.message == "Database commit failed: Integrity constraint violated"


def test_not_found_and_conflict_statuses():
    assert ResourceNotFoundError("Task", "abc").http_status == 404
    assert ConflictError("taken").http_status == 409


def test_every_error_shares_the_base():
    for err in (
        UnauthorizedError(), FieldValidationError("m", "f"),
        StorageError("m", "op"), ConflictError("m"),
    ):
        assert isinstance(err, TaskDeskError)
        assert set(err.to_response()["error"]) >= {
            "code", "message", "category", "severity", "timestamp",
        }


def test_error_context_holds_only_observability_fields():
    assert {f.name for f in fields(ErrorContext)} == {
        "timestamp", "user_id", "task_id",
    }
