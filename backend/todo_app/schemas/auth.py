"""Auth Schemas — registration, login and the public user shape.

Invariants:
    - email/password are required non-empty strings; shape checks live in the credential store
    - RegisterRequest.role is accepted but never honoured (accounts are always "user")
    - UserResponse never carries the password hash
"""

from uuid import UUID

from pydantic import Field

from todo_app.schemas.base import RequestModel, ResponseModel


class RegisterRequest(RequestModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=1024)
    # Older clients still send a role; it is ignored.
    role: str | None = None


class LoginRequest(RequestModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=1024)


class UserResponse(ResponseModel):
    """Public-facing account data."""
    id: UUID
    email: str
    role: str


class AuthResponse(ResponseModel):
    """Issued token plus the account it identifies."""
    token: str
    user: UserResponse
