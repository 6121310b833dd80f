import pytest

REGISTER_PAYLOAD = {
    "first_name": "Ana",
    "last_name": "Silva",
    "nickname": "ana",
    "email": "ana@example.com",
    "image_ref": "profile3",
}


@pytest.mark.asyncio
async def test_register_api(authorized_client):
    """[API] POST /api/v1/users registers the bearer's user id"""
    response = await authorized_client.post("/api/v1/users", json=REGISTER_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["external_id"] == "user-123"
    assert data["image_ref"] == "profile3"


@pytest.mark.asyncio
async def test_register_twice_api(authorized_client):
    await authorized_client.post("/api/v1/users", json=REGISTER_PAYLOAD)

    response = await authorized_client.post("/api/v1/users", json=REGISTER_PAYLOAD)

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_USER"


@pytest.mark.asyncio
async def test_register_requires_identity(client):
    response = await client.post("/api/v1/users", json=REGISTER_PAYLOAD)

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_register_invalid_email(authorized_client):
    response = await authorized_client.post(
        "/api/v1/users", json={**REGISTER_PAYLOAD, "email": "not-an-email"}
    )

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_me_and_change_image(authorized_client, test_user):
    me = await authorized_client.get("/api/v1/users/me")
    changed = await authorized_client.patch("/api/v1/users/me/image", json={"image_ref": "profile20"})
    rejected = await authorized_client.patch("/api/v1/users/me/image", json={"image_ref": "selfie"})

    assert me.status_code == 200
    assert me.json()["nickname"] == "ana"
    assert changed.json()["image_ref"] == "profile20"
    assert rejected.status_code == 400


@pytest.mark.asyncio
async def test_me_not_registered(authorized_client):
    response = await authorized_client.get("/api/v1/users/me")

    assert response.status_code == 404
    assert response.json()["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_profile_images(client):
    response = await client.get("/api/v1/users/profile-images")

    assert response.json()[0] == "profile1"
    assert len(response.json()) == 20
