"""Route test fixtures — async DB + FastAPI test client.

Invariants:
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness probes see the test engine
    - signup() registers through the API and returns bearer headers

Design Decisions:
    - Requests go through httpx ASGITransport: no server, no lifespan events
"""

import pytest
from httpx import ASGITransport, AsyncClient

import todo_app.infrastructure.database as db_module
from todo_app.infrastructure.database import DatabaseSessionManager, get_db
from todo_app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def signup(client):
    """Factory: register via the API, return Authorization headers."""

    async def _signup(email: str, password: str = "secret1") -> dict:
        res = await client.post(
            "/api/auth/register", json={"email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _signup


@pytest.fixture
async def alice_headers(signup):
    return await signup("alice@example.com")


@pytest.fixture
async def bob_headers(signup):
    return await signup("bob@example.com")


@pytest.fixture
def create_category(client):
    async def _create(headers: dict, name: str = "Work", **extra) -> dict:
        body = {"name": name, "description": extra.pop("description", "job stuff"), **extra}
        res = await client.post("/api/categories", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()

    return _create
