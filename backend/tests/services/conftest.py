"""Service test fixtures — two registered owners for isolation checks."""

import pytest


@pytest.fixture
async def alice(make_user):
    return await make_user("alice@example.com", "alice-pass")


@pytest.fixture
async def bob(make_user):
    return await make_user("bob@example.com", "bob-pass")
