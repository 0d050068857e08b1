"""Credential Store — account registration, authentication and password maintenance.

Invariants:
    - Emails are stored normalised (strip + lowercase); uniqueness checked case-insensitively
    - register() always writes role "user", whatever the caller asked for
    - password_hash is recomputed only when the password actually changes
    - authenticate() raises the same InvalidCredentialsError for unknown email and wrong password

Design Decisions:
    - Unknown emails still pay for one hash verification: response time does not
      reveal whether the account exists
    - IntegrityError on commit re-raised as DuplicateEmailError: covers the race
      between the existence check and the insert
"""

import logging
from functools import lru_cache

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import Role, UserId
from todo_app.core.errors import (
    DuplicateEmailError, InvalidCredentialsError, ResourceNotFoundError,
)
from todo_app.core.validate_fields import check_email, check_password, normalize_email
from todo_app.infrastructure.security import hash_password, verify_password
from todo_app.models.user import User

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash() -> str:
    return hash_password("timing-equaliser")


class CredentialStore:
    """Persists user identities and checks their secrets."""

    def __init__(self, db: AsyncSession, password_min_length: int = 6):
        self.db = db
        self.password_min_length = password_min_length

    async def get_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == normalize_email(email)),
        )
        return result.scalar_one_or_none()

    async def list_accounts(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at.desc()),
        )
        return list(result.scalars().all())

    async def register(
        self, email: str, password: str, role: Role = Role.USER,
    ) -> User:
        """Create an account. `role` is only honoured by operator tooling."""
        email = check_email(email)
        check_password(password, self.password_min_length)
        if await self.get_by_email(email):
            raise DuplicateEmailError()

        user = User(
            email=email,
            password_hash=hash_password(password),
            role=role.value,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateEmailError()
        await self.db.refresh(user)
        logger.info("Account registered", extra={"user_id": user.id})
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.get_by_email(email)
        if user is None:
            verify_password(password, _dummy_hash())
            raise InvalidCredentialsError()
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    async def set_password(self, user: User, password: str) -> bool:
        """Rehash and persist only if `password` differs from the stored secret.

        Returns True when the hash was recomputed.
        """
        check_password(password, self.password_min_length)
        if verify_password(password, user.password_hash):
            return False
        user.password_hash = hash_password(password)
        await self.db.commit()
        await self.db.refresh(user)
        return True

    async def update_account(
        self, user: User, email: str | None = None, password: str | None = None,
    ) -> User:
        """Change email and/or password. An email-only change never touches the hash."""
        if email is not None:
            email = check_email(email)
            if email != user.email:
                if await self.get_by_email(email):
                    raise DuplicateEmailError()
                user.email = email
                try:
                    await self.db.commit()
                except IntegrityError:
                    await self.db.rollback()
                    raise DuplicateEmailError()
                await self.db.refresh(user)
        if password is not None:
            await self.set_password(user, password)
        return user

    async def set_role(self, email: str, role: Role) -> User:
        user = await self.get_by_email(email)
        if user is None:
            raise ResourceNotFoundError("User")
        user.role = role.value
        await self.db.commit()
        await self.db.refresh(user)
        logger.info(f"Role set to {role.value}", extra={"user_id": user.id})
        return user
