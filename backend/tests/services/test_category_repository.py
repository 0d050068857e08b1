"""Category Repository — owner scoping, trimming, defaults and delete policy.

Tests cover:
    - list() returns only the owner's categories, newest first
    - Another owner's id behaves exactly like an unknown id (get/update/delete)
    - Blank name/description rejected; values trimmed; color defaulted
    - Duplicate names allowed
    - Deleting twice → NotFound; deleting a category with todos → CategoryInUse
"""

from uuid import uuid4

import pytest

from todo_app.core.domain_types import CategoryId
from todo_app.core.errors import (
    CategoryInUseError, InputValidationError, InvalidIdentifierError,
    ResourceNotFoundError,
)
from todo_app.services.category_repository import CategoryRepository
from todo_app.services.todo_repository import TodoRepository


@pytest.fixture
def repo(test_db):
    return CategoryRepository(test_db)


async def test_create_trims_and_defaults_color(repo, alice):
    category = await repo.create(alice.id, "  Work ", "  job stuff ")
    assert category.name == "Work"
    assert category.description == "job stuff"
    assert category.color == "#667eea"
    assert category.user_id == alice.id


async def test_create_keeps_explicit_color(repo, alice):
    category = await repo.create(alice.id, "Home", "chores", "#ff0000")
    assert category.color == "#ff0000"


@pytest.mark.parametrize("name,description", [("  ", "ok"), ("ok", ""), ("", " ")])
async def test_create_rejects_blank_fields(repo, alice, name, description):
    with pytest.raises(InputValidationError):
        await repo.create(alice.id, name, description)
    assert await repo.list(alice.id) == []


async def test_duplicate_names_allowed(repo, alice):
    await repo.create(alice.id, "Work", "one")
    await repo.create(alice.id, "Work", "two")
    assert len(await repo.list(alice.id)) == 2


async def test_list_is_owner_scoped_and_newest_first(repo, alice, bob):
    first = await repo.create(alice.id, "First", "d")
    second = await repo.create(alice.id, "Second", "d")
    await repo.create(bob.id, "Bob's", "d")
    listed = await repo.list(alice.id)
    assert [c.id for c in listed] == [second.id, first.id]


async def test_foreign_category_is_not_found(repo, alice, bob):
    category = await repo.create(alice.id, "Work", "job stuff")
    with pytest.raises(ResourceNotFoundError) as foreign:
        await repo.get_one(bob.id, category.id)
    with pytest.raises(ResourceNotFoundError) as missing:
        await repo.get_one(bob.id, uuid4())
    assert foreign.value.to_response() == missing.value.to_response()

    with pytest.raises(ResourceNotFoundError):
        await repo.update(bob.id, category.id, {"name": "Hijacked"})
    with pytest.raises(ResourceNotFoundError):
        await repo.delete(bob.id, category.id)
    assert (await repo.get_one(alice.id, category.id)).name == "Work"


async def test_find_owned_by_typed_and_string_id(repo, alice, bob):
    category = await repo.create(alice.id, "Work", "job stuff")
    assert (await repo.find_owned(alice.id, CategoryId(category.id))).id == category.id
    assert await repo.find_owned(bob.id, CategoryId(category.id)) is None
    assert (await repo.get_one(alice.id, str(category.id))).id == category.id


async def test_malformed_id(repo, alice):
    with pytest.raises(InvalidIdentifierError):
        await repo.get_one(alice.id, "nope")


async def test_update_applies_patch_and_returns_new_state(repo, alice):
    category = await repo.create(alice.id, "Work", "job stuff")
    updated = await repo.update(alice.id, category.id, {"name": " Office ", "color": "#000000"})
    assert updated.name == "Office"
    assert updated.description == "job stuff"
    assert updated.color == "#000000"


async def test_update_rejects_blank_name(repo, alice):
    category = await repo.create(alice.id, "Work", "job stuff")
    with pytest.raises(InputValidationError):
        await repo.update(alice.id, category.id, {"name": "   "})


async def test_delete_twice_is_not_found(repo, alice):
    category = await repo.create(alice.id, "Work", "job stuff")
    await repo.delete(alice.id, category.id)
    with pytest.raises(ResourceNotFoundError):
        await repo.delete(alice.id, category.id)


async def test_delete_in_use_category_refused(repo, alice, test_db):
    category = await repo.create(alice.id, "Work", "job stuff")
    await TodoRepository(test_db).create(
        alice.id, {"title": "T1", "description": "d", "category": str(category.id)},
    )
    with pytest.raises(CategoryInUseError) as exc:
        await repo.delete(alice.id, category.id)
    assert exc.value.todo_count == 1
    assert (await repo.get_one(alice.id, category.id)).id == category.id
