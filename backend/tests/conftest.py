"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Env defaults set before any todo_app import (settings load at import time)
    - Every test gets a fresh in-memory SQLite database
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-not-for-production")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import todo_app.models  # noqa: E402,F401
from todo_app.db.base import Base  # noqa: E402
from todo_app.services.credential_store import CredentialStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def make_user(test_db):
    """Factory: register an account directly through the credential store."""
    store = CredentialStore(test_db)

    async def _make(email: str = "owner@example.com", password: str = "secret1"):
        return await store.register(email, password)

    return _make
