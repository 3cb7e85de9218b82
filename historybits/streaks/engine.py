"""
Streak engine.

Every call refreshes the user's last_login. The elapsed time since the
previous last_login, in whole grace windows (one minute), decides the
new streak:

- more than one window: reset to 1 (a "loss" only if the old streak was > 0)
- exactly one window: increment
- same window: unchanged, so repeated calls never double count
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from historybits.auth.models import User
from historybits.core.config import STREAK_WINDOW


@dataclass(frozen=True)
class StreakResult:
    new_streak: int
    previous_streak: int
    streak_lost: bool
    last_login: datetime


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def elapsed_windows(last_login: datetime, now: datetime) -> int:
    """Whole grace windows between last_login and now (floor division)."""
    return (_as_utc(now) - _as_utc(last_login)) // STREAK_WINDOW


def compute_streak(
    previous_streak: int,
    last_login: Optional[datetime],
    now: datetime,
) -> StreakResult:
    previous_streak = max(previous_streak or 0, 0)

    if last_login is None:
        delta = None
    else:
        delta = elapsed_windows(last_login, now)

    if delta is None or delta > 1:
        new_streak = 1
        streak_lost = previous_streak > 0
    elif delta > 0:
        new_streak = previous_streak + 1
        streak_lost = False
    else:
        new_streak = previous_streak
        streak_lost = False

    return StreakResult(
        new_streak=new_streak,
        previous_streak=previous_streak,
        streak_lost=streak_lost,
        last_login=now,
    )


def apply_streak(db: Session, user: User, now: Optional[datetime] = None) -> StreakResult:
    """Compute the next streak for `user`, persist it with last_login=now, commit."""
    if now is None:
        now = datetime.now(timezone.utc)

    result = compute_streak(user.streak, user.last_login, now)

    user.streak = result.new_streak
    user.last_login = result.last_login
    db.commit()

    if result.streak_lost:
        print(f"[STREAK] user={user.id} lost streak of {result.previous_streak}", flush=True)
    elif result.new_streak != result.previous_streak:
        print(f"[STREAK] user={user.id} streak {result.previous_streak} -> {result.new_streak}", flush=True)

    return result


def streak_response(user: User, result: StreakResult) -> dict:
    """Shape shared by /api/streak/update, /api/login and /api/register."""
    return {
        "user": user.to_dict(),
        "streakLost": result.streak_lost,
        "previousStreak": result.previous_streak,
    }
