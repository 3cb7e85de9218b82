"""
Achievement catalog.
Static definitions, inserted by name at startup (safe to run repeatedly).
"""
from sqlalchemy.orm import Session

from historybits.achievements.models import Achievement

ACHIEVEMENTS = [
    {"name": "History Buff",     "icon": "📜", "description": "Read your first history bit",          "condition": {"type": "reads", "threshold": 1}},
    {"name": "On Fire",          "icon": "🔥", "description": "Reach a 7-day streak",                 "condition": {"type": "streak", "threshold": 7}},
    {"name": "Unstoppable",      "icon": "⚡", "description": "Reach a 30-day streak",                "condition": {"type": "streak", "threshold": 30}},
    {"name": "Collector",        "icon": "🔖", "description": "Bookmark 10 stories",                  "condition": {"type": "bookmarks", "threshold": 10}},
    {"name": "Conversationalist","icon": "💬", "description": "Leave your first comment",             "condition": {"type": "comments", "threshold": 1}},
    {"name": "Patron",           "icon": "👑", "description": "Upgrade to premium",                   "condition": {"type": "premium", "required": True}},
]


def seed_achievements(db: Session) -> int:
    """Insert catalog entries that are not in the table yet. Returns how many were added."""
    existing = {name for (name,) in db.query(Achievement.name).all()}
    added = 0
    for entry in ACHIEVEMENTS:
        if entry["name"] in existing:
            continue
        db.add(Achievement(**entry))
        added += 1

    if added:
        db.commit()
        print(f"[ACHIEVEMENT] seeded {added} catalog entries", flush=True)
    return added


def list_achievements(db: Session) -> list[dict]:
    rows = db.query(Achievement).order_by(Achievement.id.asc()).all()
    return [a.to_dict() for a in rows]
