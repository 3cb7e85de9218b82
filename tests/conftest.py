import os
import tempfile
from pathlib import Path

import pytest


# Point the app at a throwaway SQLite file before anything imports it.
_DB_DIR = tempfile.mkdtemp(prefix="historybits-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["OPENAI_API_KEY"] = ""

from fastapi.testclient import TestClient  # noqa: E402

from historybits.db.base import Base, engine, SessionLocal  # noqa: E402
from historybits.main import app, init_db  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_client(username: str = "reader", password: str = "password123") -> TestClient:
    """A client whose cookie jar holds a session for a freshly registered user."""
    client = TestClient(app)
    resp = client.post("/api/register", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return client


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_client():
    return make_client()


@pytest.fixture
def seeded(client):
    resp = client.post("/api/seed-content")
    assert resp.status_code == 200
    return client.get("/api/content").json()
