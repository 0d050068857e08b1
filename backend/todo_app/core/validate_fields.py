"""Field Validation — pure normalisation and checks shared by every repository.

Invariants:
    - require_text returns the stripped value or raises InputValidationError
    - parse_identifier never raises anything but InvalidIdentifierError
    - normalize_email is idempotent (strip + lowercase)
"""

import re
from uuid import UUID

from todo_app.core.errors import InputValidationError, InvalidIdentifierError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_email(email: str) -> str:
    """Normalise and validate email shape."""
    email = normalize_email(email)
    if not _EMAIL_PATTERN.match(email):
        raise InputValidationError("A valid email is required", "email")
    return email


def check_password(password: str, min_length: int) -> str:
    if len(password) < min_length:
        raise InputValidationError(
            f"Password must be at least {min_length} characters", "password",
        )
    return password


def require_text(value: str | None, field: str) -> str:
    """Strip value; blank or missing is an input error."""
    stripped = (value or "").strip()
    if not stripped:
        raise InputValidationError(f"{field.capitalize()} is required", field)
    return stripped


def parse_identifier(raw: str | UUID) -> UUID:
    """Parse a record identifier. Malformed values are distinct from unknown ones."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(str(raw))
