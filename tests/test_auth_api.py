"""Tests for registration, login and the session cookie."""

from stayease.config import settings

REGISTRATION = {
    "firstName": "Ana",
    "lastName": "Silva",
    "email": "Ana@Example.com",
    "phoneNumber": "+351912345678",
    "login": "ana",
    "password": "secret123",
}


def test_register_sets_session(client):
    res = client.post("/api/register", json=REGISTRATION)
    assert res.status_code == 201
    body = res.json()
    assert body["login"] == "ana"
    assert body["email"] == "ana@example.com"
    assert body["is_host"] is False
    assert "hashed_password" not in body
    assert settings.SESSION_COOKIE_NAME in res.cookies

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_accepts_snake_case(client):
    payload = {
        "first_name": "Bob", "last_name": "Stone", "email": "bob@example.com",
        "phone_number": "+15551230000", "login": "bob", "password": "secret123", "is_host": True,
    }
    res = client.post("/api/register", json=payload)
    assert res.status_code == 201
    assert res.json()["is_host"] is True


def test_register_invalid_data(client):
    res = client.post("/api/register", json={**REGISTRATION, "email": "not-an-email", "password": "123"})
    assert res.status_code == 400
    body = res.json()
    assert body["detail"] == "Invalid data"
    fields = {e["loc"][-1] for e in body["errors"]}
    assert {"email", "password"} <= fields


def test_register_duplicate_login(client, make_client):
    client.post("/api/register", json=REGISTRATION)
    res = make_client().post("/api/register", json={**REGISTRATION, "email": "other@example.com"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Login already taken"


def test_register_duplicate_email_any_case(client, make_client):
    client.post("/api/register", json=REGISTRATION)
    res = make_client().post("/api/register", json={**REGISTRATION, "login": "ana2", "email": "ANA@example.com"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Email already registered"


def test_login_by_login_and_email(client, make_client):
    client.post("/api/register", json=REGISTRATION)

    c = make_client()
    res = c.post("/api/login", json={"login": "ana", "password": "secret123"})
    assert res.status_code == 200
    assert c.get("/api/user").status_code == 200

    c = make_client()
    res = c.post("/api/login", json={"login": "ANA@example.com", "password": "secret123"})
    assert res.status_code == 200
    assert res.json()["login"] == "ana"


def test_login_wrong_password(client, make_client):
    client.post("/api/register", json=REGISTRATION)
    c = make_client()
    res = c.post("/api/login", json={"login": "ana", "password": "wrong-password"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid login or password"
    assert c.get("/api/user").status_code == 401


def test_login_unknown_user(client):
    res = client.post("/api/login", json={"login": "ghost", "password": "secret123"})
    assert res.status_code == 400


def test_logout_clears_session(guest_client):
    assert guest_client.get("/api/user").status_code == 200
    res = guest_client.post("/api/logout")
    assert res.status_code == 200
    assert guest_client.get("/api/user").status_code == 401


def test_tampered_cookie_is_anonymous(client):
    res = client.get("/api/user", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}=forged-token"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Not authenticated"


def test_update_profile(guest_client):
    res = guest_client.put("/api/user", json={"firstName": "Renamed", "phoneNumber": "+15559998888"})
    assert res.status_code == 200
    assert res.json()["first_name"] == "Renamed"
    assert res.json()["phone_number"] == "+15559998888"
    assert res.json()["last_name"] == "User"


def test_update_email_taken(signup):
    first = signup(login="first")
    second = signup(login="second")
    res = second.put("/api/user", json={"email": "FIRST@example.com"})
    assert res.status_code == 400
    assert first.get("/api/user").json()["email"] == "first@example.com"


def test_password_change_requires_current_password(guest_client, make_client):
    res = guest_client.put("/api/user", json={"password": "newsecret"})
    assert res.status_code == 400
    res = guest_client.put("/api/user", json={"password": "newsecret", "currentPassword": "secret123"})
    assert res.status_code == 200

    c = make_client()
    assert c.post("/api/login", json={"login": "guesty", "password": "secret123"}).status_code == 400
    assert c.post("/api/login", json={"login": "guesty", "password": "newsecret"}).status_code == 200


def test_public_user_profile(client, host_client):
    res = client.get(f"/api/users/{host_client.user['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["is_host"] is True
    assert "email" not in body
    assert client.get("/api/users/9999").status_code == 404
