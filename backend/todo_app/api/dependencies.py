"""Request Dependencies — authorization guard and per-request service wiring.

Invariants:
    - get_current_user: missing header, non-Bearer scheme, bad/expired token, or a
      token whose user no longer exists all end in UnauthenticatedError (401)
    - require_admin runs get_current_user first, then demands role "admin" (403 otherwise)
    - Repositories are built per request around the request's AsyncSession

Design Decisions:
    - HTTPBearer(auto_error=False): the 401 body goes through our error envelope
      instead of FastAPI's default 403 detail
    - Token service built from settings per request: no module-level secret
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.config import Settings, get_settings
from todo_app.core.domain_types import Role
from todo_app.core.errors import ForbiddenError, InvalidTokenError, UnauthenticatedError
from todo_app.infrastructure.database import get_db
from todo_app.infrastructure.security import TokenService
from todo_app.models.user import User
from todo_app.services.category_repository import CategoryRepository
from todo_app.services.credential_store import CredentialStore
from todo_app.services.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    return TokenService(
        settings.jwt_secret, settings.jwt_algorithm, settings.token_ttl_days,
    )


def get_credential_store(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CredentialStore:
    return CredentialStore(db, settings.password_min_length)


def get_category_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CategoryRepository:
    return CategoryRepository(db, settings.default_category_color)


def get_todo_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TodoRepository:
    return TodoRepository(db)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> User:
    """Resolve the bearer token to a stored account."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("No token provided")
    try:
        user_id = tokens.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.info(f"Token rejected: {e}")
        raise UnauthenticatedError("Invalid token")
    user = await store.get_by_id(user_id)
    if user is None:
        raise UnauthenticatedError("User not found")
    return user


async def require_admin(
    user: Annotated[User, Depends(get_current_user)],
) -> User:
    if user.role != Role.ADMIN.value:
        raise ForbiddenError()
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]
