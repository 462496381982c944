"""Error Hierarchy — verifies codes, statuses and the REST envelope.

Tests:
    - each domain error carries its HTTP status and code
    - to_response() exposes validation details and isbn context
"""

from bookshelf.core.errors import (
    BookNotFoundError,
    BookValidationError,
    BookshelfError,
    DatabaseError,
    DuplicateIsbnError,
    ErrorCategory,
    ErrorSeverity,
)


def test_validation_error_is_400_with_details():
    err = BookValidationError(["title is required"])
    assert err.http_status == 400
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["details"] == ["title is required"]
    assert err.details == ["title is required"]
    assert not hasattr(err, "errors")


def test_not_found_is_404_and_carries_isbn():
    err = BookNotFoundError("0987654321")
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["context"]["isbn"] == "0987654321"
    assert "0987654321" in body["message"]


def test_duplicate_isbn_is_409_conflict():
    err = DuplicateIsbnError("1234567890")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.code == "DUPLICATE_KEY"


def test_database_error_is_500_critical():
    err = DatabaseError("boom", "execute")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.message == "Database execute failed: boom"


def test_all_errors_share_base():
    for err in (
        BookValidationError([]), BookNotFoundError("x"),
        DuplicateIsbnError("x"), DatabaseError("m", "op"),
    ):
        assert isinstance(err, BookshelfError)
