"""Photo Routes — verifies photo registration and main-photo endpoints over HTTP."""

import pytest


def _as(user):
    return {"X-User-Id": str(user.id)}


@pytest.fixture
async def alice(make_user):
    return await make_user("alice")


async def _add(client, user, name):
    res = await client.post(
        f"/api/v1/users/{user.id}/photos",
        json={"url": f"https://img.example/{name}.jpg", "public_id": name},
        headers=_as(user),
    )
    assert res.status_code == 201
    return res.json()


async def test_first_photo_is_main(client, alice):
    photo = await _add(client, alice, "one")
    assert photo["is_main"] is True


async def test_set_main_and_list(client, alice):
    first = await _add(client, alice, "one")
    second = await _add(client, alice, "two")

    res = await client.post(
        f"/api/v1/users/{alice.id}/photos/{second['id']}/setMain", headers=_as(alice),
    )
    assert res.status_code == 204

    listed = await client.get(f"/api/v1/users/{alice.id}/photos", headers=_as(alice))
    mains = {p["id"]: p["is_main"] for p in listed.json()}
    assert mains == {first["id"]: False, second["id"]: True}

    detail = await client.get(f"/api/v1/users/{alice.id}", headers=_as(alice))
    assert detail.json()["photo_url"] == "https://img.example/two.jpg"


async def test_delete_main_photo_is_rejected(client, alice):
    first = await _add(client, alice, "one")
    res = await client.delete(
        f"/api/v1/users/{alice.id}/photos/{first['id']}", headers=_as(alice),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MAIN_PHOTO_DELETE"


async def test_delete_photo(client, alice):
    await _add(client, alice, "one")
    second = await _add(client, alice, "two")
    res = await client.delete(
        f"/api/v1/users/{alice.id}/photos/{second['id']}", headers=_as(alice),
    )
    assert res.status_code == 204

    missing = await client.get(
        f"/api/v1/users/{alice.id}/photos/{second['id']}", headers=_as(alice),
    )
    assert missing.status_code == 404


async def test_add_photo_for_other_user_is_forbidden(client, alice, make_user):
    bob = await make_user("bob", gender="male")
    res = await client.post(
        f"/api/v1/users/{alice.id}/photos",
        json={"url": "https://img.example/x.jpg"},
        headers=_as(bob),
    )
    assert res.status_code == 403


async def test_photo_under_another_user_is_not_found(client, alice, make_user):
    bob = await make_user("bob", gender="male")
    photo = await _add(client, alice, "one")

    own = await client.get(f"/api/v1/users/{alice.id}/photos/{photo['id']}", headers=_as(alice))
    assert own.status_code == 200

    res = await client.get(f"/api/v1/users/{bob.id}/photos/{photo['id']}", headers=_as(bob))
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
