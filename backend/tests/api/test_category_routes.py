"""Category Routes — owner-scoped CRUD over HTTP.

Tests cover:
    - create → 201 with trimmed fields and default color; blank fields → 400
    - list only shows the caller's categories
    - another user's id → 404 on GET/PUT/DELETE, identical to an unknown id
    - PUT partial update, explicit null / unknown field → 400
    - DELETE → 200 {message}; again → 404; in-use → 409
"""

from uuid import uuid4


async def test_create_category(client, alice_headers):
    res = await client.post(
        "/api/categories",
        json={"name": "  Work ", "description": " job stuff "},
        headers=alice_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert (body["name"], body["description"], body["color"]) == ("Work", "job stuff", "#667eea")


async def test_create_category_blank_name(client, alice_headers):
    res = await client.post(
        "/api/categories", json={"name": "   ", "description": "d"}, headers=alice_headers,
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_create_category_missing_description(client, alice_headers):
    res = await client.post("/api/categories", json={"name": "Work"}, headers=alice_headers)
    assert res.status_code == 400


async def test_categories_isolated_between_users(client, alice_headers, bob_headers, create_category):
    c1 = await create_category(alice_headers, "C1")
    res = await client.get("/api/categories", headers=bob_headers)
    assert res.status_code == 200
    assert c1["id"] not in [c["id"] for c in res.json()]

    mine = await client.get("/api/categories", headers=alice_headers)
    assert [c["id"] for c in mine.json()] == [c1["id"]]


async def test_foreign_category_looks_missing(client, alice_headers, bob_headers, create_category):
    c1 = await create_category(alice_headers)
    foreign = await client.get(f"/api/categories/{c1['id']}", headers=bob_headers)
    missing = await client.get(f"/api/categories/{uuid4()}", headers=bob_headers)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()

    put = await client.put(
        f"/api/categories/{c1['id']}", json={"name": "Mine"}, headers=bob_headers,
    )
    assert put.status_code == 404
    gone = await client.delete(f"/api/categories/{c1['id']}", headers=bob_headers)
    assert gone.status_code == 404

    still = await client.get(f"/api/categories/{c1['id']}", headers=alice_headers)
    assert still.json()["name"] == "Work"


async def test_get_malformed_id(client, alice_headers):
    res = await client.get("/api/categories/not-an-id", headers=alice_headers)
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_IDENTIFIER"


async def test_update_partial(client, alice_headers, create_category):
    c1 = await create_category(alice_headers)
    res = await client.put(
        f"/api/categories/{c1['id']}", json={"color": "#123456"}, headers=alice_headers,
    )
    assert res.status_code == 200
    assert res.json()["color"] == "#123456"
    assert res.json()["name"] == "Work"


async def test_update_rejects_null_and_unknown_fields(client, alice_headers, create_category):
    c1 = await create_category(alice_headers)
    null = await client.put(
        f"/api/categories/{c1['id']}", json={"name": None}, headers=alice_headers,
    )
    unknown = await client.put(
        f"/api/categories/{c1['id']}", json={"user_id": str(uuid4())}, headers=alice_headers,
    )
    assert null.status_code == unknown.status_code == 400


async def test_delete_then_delete_again(client, alice_headers, create_category):
    c1 = await create_category(alice_headers)
    first = await client.delete(f"/api/categories/{c1['id']}", headers=alice_headers)
    assert first.status_code == 200
    assert first.json() == {"message": "Category deleted"}
    second = await client.delete(f"/api/categories/{c1['id']}", headers=alice_headers)
    assert second.status_code == 404


async def test_delete_category_in_use(client, alice_headers, create_category):
    c1 = await create_category(alice_headers)
    await client.post(
        "/api/todos",
        json={"title": "T1", "description": "d", "category": c1["id"]},
        headers=alice_headers,
    )
    res = await client.delete(f"/api/categories/{c1['id']}", headers=alice_headers)
    assert res.status_code == 409
    assert res.json()["code"] == "CATEGORY_IN_USE"
