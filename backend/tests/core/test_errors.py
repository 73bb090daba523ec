"""Error Hierarchy — status codes, categories and response envelopes."""

from app.core.errors import (
    ConstraintViolationError, DatabaseError, EntityValidationError,
    ErrorCategory, MatchbookError, RegistrationError, ResourceNotFoundError,
)


def test_not_found_carries_resource_context():
    err = ResourceNotFoundError("user", 5)
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"] == {"resource": "user", "key": "5"}


def test_validation_error_includes_details():
    err = EntityValidationError("bad", details=[{"field": "email"}])
    assert err.http_status == 400
    assert err.to_response()["error"]["details"] == [{"field": "email"}]


def test_constraint_violation_is_a_database_error_with_409():
    err = ConstraintViolationError("insert")
    assert isinstance(err, DatabaseError)
    assert err.http_status == 409
    assert err.category is ErrorCategory.CONFLICT


def test_database_error_is_503():
    assert DatabaseError("down", "execute").http_status == 503


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("x", 1), EntityValidationError("x"),
        DatabaseError("x", "y"), RegistrationError("x"),
    ):
        assert isinstance(err, MatchbookError)
