"""Error Hierarchy — status codes and response envelopes.

Tests:
    - Each domain error maps to its documented HTTP status and code
    - to_response() is {"error": message, "code": CODE}
    - DatabaseError never exposes store details in its response
"""

import pytest

from todo_app.core.errors import (
    CategoryInUseError, DatabaseError, DuplicateEmailError, ForbiddenError,
    InputValidationError, InvalidCategoryError, InvalidCredentialsError,
    InvalidIdentifierError, ResourceNotFoundError, UnauthenticatedError,
)


@pytest.mark.parametrize("error,status,code", [
    (InputValidationError("bad", "title"), 400, "VALIDATION_ERROR"),
    (InvalidIdentifierError("x"), 400, "INVALID_IDENTIFIER"),
    (InvalidCategoryError(), 400, "INVALID_CATEGORY"),
    (DuplicateEmailError(), 400, "DUPLICATE_EMAIL"),
    (InvalidCredentialsError(), 401, "INVALID_CREDENTIALS"),
    (UnauthenticatedError(), 401, "UNAUTHENTICATED"),
    (ForbiddenError(), 403, "FORBIDDEN"),
    (ResourceNotFoundError("ToDo"), 404, "RESOURCE_NOT_FOUND"),
    (CategoryInUseError(2), 409, "CATEGORY_IN_USE"),
    (DatabaseError("boom", "commit"), 500, "DATABASE_ERROR"),
])
def test_error_status_and_code(error, status, code):
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    body = ResourceNotFoundError("Category").to_response()
    assert body == {"error": "Category not found", "code": "RESOURCE_NOT_FOUND"}


def test_database_error_response_is_generic():
    body = DatabaseError("password authentication failed for user x", "execute").to_response()
    assert "password" not in body["error"]
    assert body["code"] == "DATABASE_ERROR"


def test_invalid_credentials_message_is_constant():
    assert InvalidCredentialsError().message == "Invalid credentials"
