from datetime import datetime, timedelta, timezone

from historybits.auth.models import User
from conftest import make_client


def _set_user(db, username, **values):
    db.query(User).filter(User.username == username).update(values)
    db.commit()


def test_update_requires_session(client):
    resp = client.post("/api/streak/update")
    assert resp.status_code == 401


def test_repeated_updates_inside_window_do_not_double_count(auth_client):
    first = auth_client.post("/api/streak/update").json()
    second = auth_client.post("/api/streak/update").json()
    assert first["user"]["streak"] == second["user"]["streak"]
    assert second["streakLost"] is False


def test_one_window_gap_increments(db):
    client = make_client("ada")
    _set_user(
        db, "ada",
        streak=5,
        last_login=datetime.now(timezone.utc) - timedelta(seconds=90),
    )

    data = client.post("/api/streak/update").json()
    assert data["previousStreak"] == 5
    assert data["user"]["streak"] == 6
    assert data["streakLost"] is False


def test_long_gap_loses_streak(db):
    client = make_client("ada")
    _set_user(
        db, "ada",
        streak=5,
        last_login=datetime.now(timezone.utc) - timedelta(minutes=3),
    )

    data = client.post("/api/streak/update").json()
    assert data == {
        "user": data["user"],
        "streakLost": True,
        "previousStreak": 5,
    }
    assert data["user"]["streak"] == 1


def test_login_runs_the_streak_engine(db):
    make_client("ada", "pw")
    _set_user(
        db, "ada",
        streak=2,
        last_login=datetime.now(timezone.utc) - timedelta(seconds=75),
    )

    client = make_client("other")
    resp = client.post("/api/login", json={"username": "ada", "password": "pw"})
    data = resp.json()
    assert data["previousStreak"] == 2
    assert data["user"]["streak"] == 3


def test_update_for_deleted_user_is_404(db):
    client = make_client("ada")
    db.query(User).filter(User.username == "ada").delete()
    db.commit()

    resp = client.post("/api/streak/update")
    assert resp.status_code == 404
