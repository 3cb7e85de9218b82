from fastapi.testclient import TestClient

from historybits.main import app
from conftest import make_client


def test_register_returns_user_and_sets_cookie(client):
    resp = client.post("/api/register", json={"username": "ada", "password": "secret"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["username"] == "ada"
    assert data["user"]["premium"] is False
    assert "password_hash" not in data["user"]
    assert data["streakLost"] is False
    assert "access_token" in resp.cookies

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["username"] == "ada"


def test_register_rejects_duplicate_username(client):
    make_client("ada")
    resp = client.post("/api/register", json={"username": "ada", "password": "other"})
    assert resp.status_code == 400
    assert "application/json" in resp.headers.get("content-type", "")


def test_register_requires_username_and_password(client):
    resp = client.post("/api/register", json={"username": "  ", "password": ""})
    assert resp.status_code == 400


def test_login_with_bad_credentials_is_401(client):
    make_client("ada", "right-password")
    resp = client.post("/api/login", json={"username": "ada", "password": "wrong"})
    assert resp.status_code == 401


def test_login_then_current_user(client):
    make_client("ada", "pw123456")
    resp = client.post("/api/login", json={"username": "ada", "password": "pw123456"})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Login successful"
    assert client.get("/api/user").json()["username"] == "ada"


def test_bearer_header_is_accepted(client):
    resp = client.post("/api/register", json={"username": "ada", "password": "pw"})
    token = resp.cookies["access_token"]
    fresh = TestClient(app)
    me = fresh.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "ada"


def test_unauthenticated_access_is_plain_text_401(client):
    resp = client.get("/api/user")
    assert resp.status_code == 401
    assert "text/plain" in resp.headers.get("content-type", "")
    assert resp.text == "Not authenticated"


def test_garbage_token_is_401(client):
    resp = client.get("/api/bookmarks", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_logout_clears_session(auth_client):
    assert auth_client.get("/api/user").status_code == 200
    resp = auth_client.post("/api/logout")
    assert resp.status_code == 200
    assert auth_client.get("/api/user").status_code == 401
