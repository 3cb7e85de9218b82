from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from historybits.auth.models import User
from historybits.core.deps import get_current_user_id
from historybits.db.session import get_db
from historybits.streaks.engine import apply_streak, streak_response

router = APIRouter(prefix="/api/streak", tags=["streak"])


@router.post("/update")
def update_streak(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Record activity for the session user and report whether the streak moved.
    Safe to call on a timer: calls inside one grace window leave it unchanged.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    result = apply_streak(db, user)
    return streak_response(user, result)
