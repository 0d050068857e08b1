"""Auth Routes — register, login, and the caller's own account.

Invariants:
    - register returns 201 {token, user}; role is always "user"
    - login failures are a single 401 "Invalid credentials" whatever went wrong
    - Tokens are issued only after the account is persisted / verified
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_app.api.dependencies import (
    CurrentUser, get_credential_store, get_token_service,
)
from todo_app.infrastructure.security import TokenService
from todo_app.schemas.auth import (
    AuthResponse, LoginRequest, RegisterRequest, UserResponse,
)
from todo_app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])

Store = Annotated[CredentialStore, Depends(get_credential_store)]
Tokens = Annotated[TokenService, Depends(get_token_service)]


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, store: Store, tokens: Tokens):
    """Create an account and sign the caller in."""
    user = await store.register(body.email, body.password)
    return AuthResponse(
        token=tokens.issue(user.id), user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, store: Store, tokens: Tokens):
    user = await store.authenticate(body.email, body.password)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return AuthResponse(
        token=tokens.issue(user.id), user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUser):
    return user
