"""Auth Routes — register/login/logout/me over HTTP.

Tests cover:
    - register returns 201, token in body and session cookie
    - duplicate email → 409
    - login with bad credentials → 401 INVALID_CREDENTIALS
    - logout ends the session; the token stops working
    - /me reflects the authenticated identity
"""

REGISTER = "/api/v1/auth/register"
LOGIN = "/api/v1/auth/login"


async def _register(client, email="carol@example.com", password="carol-password"):
    return await client.post(
        REGISTER, json={"name": "Carol", "email": email, "password": password},
    )


async def test_register_sets_cookie_and_returns_token(client):
    res = await _register(client)
    assert res.status_code == 201
    body = res.json()
    assert body["user"]["email"] == "carol@example.com"
    assert body["user"]["name"] == "Carol"
    assert "password" not in body["user"]
    set_cookie = res.headers["set-cookie"]
    assert f"taskdesk_session={body['token']}" in set_cookie
    assert "httponly" in set_cookie.lower()


async def test_register_duplicate_email_is_409(client):
    await _register(client)
    res = await _register(client, email="CAROL@example.com")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_ALREADY_REGISTERED"


async def test_register_invalid_payload_is_400(client):
    res = await client.post(
        REGISTER, json={"name": "Carol", "email": "nope", "password": "x"},
    )
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"email", "password"}


async def test_login_then_me(client):
    await _register(client)
    client.cookies.clear()

    res = await client.post(
        LOGIN, json={"email": "carol@example.com", "password": "carol-password"},
    )
    assert res.status_code == 200
    token = res.json()["token"]

    me = await client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"},
    )
    assert me.status_code == 200
    assert me.json()["email"] == "carol@example.com"


async def test_login_bad_password_is_401(client):
    await _register(client)
    res = await client.post(
        LOGIN, json={"email": "carol@example.com", "password": "wrong-password"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_logout_invalidates_token(client, alice, alice_headers):
    res = await client.post("/api/v1/auth/logout", headers=alice_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True}

    res = await client.get("/api/v1/tasks", headers=alice_headers)
    assert res.status_code == 401


async def test_logout_without_session_is_401(client):
    res = await client.post("/api/v1/auth/logout")
    assert res.status_code == 401


async def test_me_requires_session(client):
    res = await client.get("/api/v1/auth/me")
    assert res.status_code == 401
