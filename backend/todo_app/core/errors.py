"""Error Hierarchy — typed, categorized exceptions for every to-do API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message, "code": CODE}
    - Ownership mismatch and absence share ResourceNotFoundError (same message, same status)

Design Decisions:
    - Single TodoAppError base: one FastAPI handler renders every domain failure
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class TodoAppError(Exception):
    """Base exception for all to-do API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(TodoAppError):
    """Required field missing, blank, or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidIdentifierError(TodoAppError):
    """Identifier is not a well-formed UUID."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID format", "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class InvalidCategoryError(TodoAppError):
    """Referenced category is absent or owned by someone else."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Category not found or does not belong to you",
            "INVALID_CATEGORY", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


class DuplicateEmailError(TodoAppError):
    """Registration attempted with an email that already has an account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User already exists", "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(TodoAppError):
    """Login failed. Same message whether the email or the password was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class UnauthenticatedError(TodoAppError):
    """Missing, invalid or expired token, or the token's user no longer exists."""
    def __init__(self, message: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(TodoAppError):
    """Authenticated identity lacks the required role."""
    def __init__(self, message: str = "Admin access required", context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(TodoAppError):
    """Requested resource does not exist for the caller."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type


class CategoryInUseError(TodoAppError):
    """Category still referenced by todos."""
    def __init__(self, todo_count: int, context: ErrorContext | None = None):
        super().__init__(
            f"Category is used by {todo_count} todo(s); move or delete them first",
            "CATEGORY_IN_USE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.todo_count = todo_count


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InvalidTokenError(Exception):
    """Token signature, shape or expiry check failed.

    Raised by the token service only; the authorization layer converts it
    into UnauthenticatedError so no HTTP concern leaks into signing code.
    """


class DatabaseError(TodoAppError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        """Store details stay in the logs, never in the response body."""
        return {"error": "An unexpected error occurred", "code": self.code}
