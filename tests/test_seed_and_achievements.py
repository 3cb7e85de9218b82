from historybits.achievements.catalog import ACHIEVEMENTS, seed_achievements
from historybits.content.seed import SEED_CONTENT, replace_content
from conftest import make_client


def test_seed_replaces_content_and_dependents(client):
    first = client.post("/api/seed-content").json()
    assert first["count"] == 9

    ada = make_client("ada")
    content_id = client.get("/api/content").json()[0]["id"]
    ada.post(f"/api/content/{content_id}/bookmark")
    ada.post(f"/api/content/{content_id}/comment", json={"text": "hi"})

    client.post("/api/seed-content")
    assert len(client.get("/api/content").json()) == 9
    assert ada.get("/api/bookmarks").json() == []


def test_achievements_catalog_requires_session(client):
    assert client.get("/api/achievements").status_code == 401


def test_achievements_catalog(auth_client):
    rows = auth_client.get("/api/achievements").json()
    assert [r["name"] for r in rows] == [a["name"] for a in ACHIEVEMENTS]
    assert rows[1]["condition"] == {"type": "streak", "threshold": 7}


def test_seed_achievements_is_idempotent(db):
    assert seed_achievements(db) == 0


def test_replace_content_with_custom_items(db):
    item = {
        "title": "Tiny catalog",
        "period": "Now",
        "category": "Test",
        "hook": "h",
        "content": "c",
        "takeaway": "t",
    }
    assert replace_content(db, [item]) == 1
    assert replace_content(db) == len(SEED_CONTENT)
