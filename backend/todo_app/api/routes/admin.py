"""Admin Routes — operator-only account listing.

Invariants:
    - Guarded by require_admin: 401 without a valid token, 403 for role "user"
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from todo_app.api.dependencies import AdminUser, get_credential_store
from todo_app.schemas.auth import UserResponse
from todo_app.services.credential_store import CredentialStore

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    admin: AdminUser,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
):
    return await store.list_accounts()
