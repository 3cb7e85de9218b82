from conftest import make_client


def test_bookmark_toggle_flips_each_call(seeded):
    client = make_client("ada")
    content_id = next(row["id"] for row in seeded if row["id"] == 7)

    first = client.post(f"/api/content/{content_id}/bookmark").json()
    second = client.post(f"/api/content/{content_id}/bookmark").json()

    assert first["bookmarked"] is True
    assert first["message"] == "Content bookmarked successfully"
    assert second["bookmarked"] is False
    assert client.get(f"/api/content/{content_id}/bookmarked").json() == {"bookmarked": False}


def test_bookmark_state_is_per_user(seeded):
    ada = make_client("ada")
    bob = make_client("bob")
    content_id = seeded[0]["id"]

    ada.post(f"/api/content/{content_id}/bookmark")
    assert ada.get(f"/api/content/{content_id}/bookmarked").json()["bookmarked"] is True
    assert bob.get(f"/api/content/{content_id}/bookmarked").json()["bookmarked"] is False


def test_bookmarks_list(seeded):
    client = make_client("ada")
    for row in seeded[:3]:
        client.post(f"/api/content/{row['id']}/bookmark")
    client.post(f"/api/content/{seeded[1]['id']}/bookmark")

    items = client.get("/api/bookmarks").json()
    # newest bookmark first
    assert [item["content"]["id"] for item in items] == [seeded[2]["id"], seeded[0]["id"]]
    assert all(item["bookmarkedAt"] for item in items)


def test_bookmark_missing_content_is_404(seeded):
    client = make_client("ada")
    assert client.post("/api/content/999/bookmark").status_code == 404


def test_bookmarks_require_session(client):
    assert client.get("/api/bookmarks").status_code == 401
    assert client.get("/api/content/1/bookmarked").status_code == 401


def test_bookmark_state_for_missing_content_is_404(seeded):
    client = make_client("ada")
    assert client.get("/api/content/999/bookmarked").status_code == 404
