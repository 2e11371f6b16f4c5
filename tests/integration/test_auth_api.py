"""Integration tests for sign-up, login, logout and the profile endpoints."""

import pytest


# ---------------------------------------------------------------------------
# Sign-up / login
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_signup_returns_token_and_profile(client, signup_payload):
    """POST /auth/signup: creates the volunteer and logs them in."""
    response = await client.post("/auth/signup", json=signup_payload)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    volunteer = data["volunteer"]
    assert volunteer["age_group"] == "teens"
    assert volunteer["age_group_label"] == "Teens (11-15 years)"
    assert "password_hash" not in volunteer


@pytest.mark.asyncio
@pytest.mark.integration
async def test_signup_password_mismatch(client, signup_payload):
    """POST /auth/signup: 422 when the passwords differ."""
    signup_payload["confirm_password"] = "nope"
    response = await client.post("/auth/signup", json=signup_payload)
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_signup_duplicate_email(client, signup_payload, auth_headers):
    """POST /auth/signup: 409 for an email already on file."""
    response = await client.post("/auth/signup", json=signup_payload)
    assert response.status_code == 409


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login(client, signup_payload, auth_headers):
    """POST /auth/login: right password gets a token, wrong one gets 401."""
    response = await client.post(
        "/auth/login",
        json={"email": signup_payload["email"], "password": signup_payload["password"]},
    )
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]

    me = await client.get(
        "/volunteers/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert me.status_code == 200
    assert me.json()["email"] == signup_payload["email"]

    bad = await client.post(
        "/auth/login",
        json={"email": signup_payload["email"], "password": "not-it"},
    )
    assert bad.status_code == 401


@pytest.mark.asyncio
@pytest.mark.integration
async def test_logout(client, auth_headers):
    """POST /auth/logout: 204 for an authenticated volunteer."""
    response = await client.post("/auth/logout", headers=auth_headers)
    assert response.status_code == 204


@pytest.mark.asyncio
@pytest.mark.integration
async def test_invalid_token_is_rejected(client):
    """GET /volunteers/me: 401 for a token that does not verify."""
    response = await client.get(
        "/volunteers/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_age_changes_age_group(client, auth_headers):
    """PATCH /volunteers/me: a birthday can move the volunteer up a table."""
    response = await client.patch(
        "/volunteers/me", json={"age": 16}, headers=auth_headers
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["age"] == 16
    assert data["age_group"] == "young_adults"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
