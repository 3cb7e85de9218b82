from conftest import make_client


def test_list_is_newest_first(client, seeded):
    ids = [row["id"] for row in seeded]
    assert len(ids) == 9
    assert ids == sorted(ids, reverse=True)
    assert {"title", "period", "hook", "content", "takeaway", "imageUrl", "likes"} <= set(seeded[0])


def test_every_third_card_is_locked_for_non_premium(client, seeded):
    locked = [i for i, row in enumerate(seeded) if row["isPremiumLocked"]]
    assert locked == [2, 5, 8]


def test_premium_viewer_sees_nothing_locked(seeded):
    client = make_client("patron")
    client.post("/api/user/upgrade")
    rows = client.get("/api/content").json()
    assert not any(row["isPremiumLocked"] for row in rows)


def test_missing_content_is_404_with_error_body(client):
    resp = client.get("/api/content/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Content not found"}


def test_anonymous_fetch_is_not_enriched(client, seeded):
    data = client.get(f"/api/content/{seeded[0]['id']}").json()
    assert data["title"] == seeded[0]["title"]
    assert "comments" not in data
    assert "isBookmarked" not in data


def test_signed_in_fetch_includes_comments_and_state(seeded):
    client = make_client("ada")
    content_id = seeded[0]["id"]
    client.post(f"/api/content/{content_id}/comment", json={"text": "Wild story"})
    client.post(f"/api/content/{content_id}/bookmark")

    data = client.get(f"/api/content/{content_id}").json()
    assert data["isBookmarked"] is True
    assert data["isLiked"] is False
    assert [c["text"] for c in data["comments"]] == ["Wild story"]
    assert data["comments"][0]["username"] == "ada"


def test_like_is_once_per_user(seeded):
    content_id = seeded[0]["id"]
    ada = make_client("ada")
    bob = make_client("bob")

    assert ada.post(f"/api/content/{content_id}/like").json()["likes"] == 1
    assert ada.post(f"/api/content/{content_id}/like").json()["likes"] == 1
    resp = bob.post(f"/api/content/{content_id}/like")
    assert resp.json()["likes"] == 2
    assert resp.json()["isLiked"] is True


def test_unlike_only_removes_own_like(seeded):
    content_id = seeded[0]["id"]
    ada = make_client("ada")
    bob = make_client("bob")

    ada.post(f"/api/content/{content_id}/like")
    assert bob.post(f"/api/content/{content_id}/unlike").json()["likes"] == 1
    data = ada.post(f"/api/content/{content_id}/unlike").json()
    assert data["likes"] == 0
    assert data["isLiked"] is False
    assert ada.post(f"/api/content/{content_id}/unlike").json()["likes"] == 0


def test_like_requires_session_and_existing_content(client, seeded):
    assert client.post(f"/api/content/{seeded[0]['id']}/like").status_code == 401
    assert make_client("ada").post("/api/content/999/like").status_code == 404


def test_comments_listing(seeded):
    content_id = seeded[1]["id"]
    ada = make_client("ada")
    bob = make_client("bob")
    ada.post(f"/api/content/{content_id}/comment", json={"text": "first"})
    created = bob.post(f"/api/content/{content_id}/comment", json={"text": "  second  "})
    assert created.status_code == 200
    assert created.json()["text"] == "second"
    assert created.json()["username"] == "bob"

    comments = ada.get(f"/api/content/{content_id}/comments").json()
    assert [c["text"] for c in comments] == ["second", "first"]


def test_blank_comment_is_400(seeded):
    ada = make_client("ada")
    resp = ada.post(f"/api/content/{seeded[0]['id']}/comment", json={"text": "   "})
    assert resp.status_code == 400
    resp = ada.post(f"/api/content/{seeded[0]['id']}/comment", json={})
    assert resp.status_code == 400


def test_comments_for_missing_content_is_404(client):
    assert client.get("/api/content/999/comments").status_code == 404
