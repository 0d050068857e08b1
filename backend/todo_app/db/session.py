"""Standalone Sessions — async DB sessions for direct usage outside FastAPI.

Invariants:
    - Each standalone_session owns its engine and disposes it on exit
    - Never creates tables: the schema belongs to Alembic (`alembic upgrade head`)
    - Meant for the admin CLI and scripts; requests use infrastructure/database.py
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

import todo_app.models  # noqa: F401


@asynccontextmanager
async def standalone_session(database_url: str) -> AsyncGenerator[AsyncSession, None]:
    """Open a one-off session against an already-migrated database."""
    engine = create_async_engine(database_url, echo=False)
    try:
        factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        async with factory() as session:
            yield session
    finally:
        await engine.dispose()
