"""
Premium flag toggles. There is no payment provider behind these; upgrading
just flips users.premium.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from historybits.auth.models import User
from historybits.core.deps import get_current_user
from historybits.db.session import get_db

router = APIRouter(prefix="/api", tags=["premium"])


def _set_premium(db: Session, user: User, premium: bool) -> User:
    user.premium = premium
    db.commit()
    db.refresh(user)
    print(f"[PREMIUM] user={user.id} premium={premium}", flush=True)
    return user


@router.post("/user/upgrade")
@router.post("/premium/upgrade")
def upgrade(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    user = _set_premium(db, user, True)
    return {"message": "Successfully upgraded to premium", "user": user.to_dict()}


@router.post("/user/cancel-premium")
def cancel_premium(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    user = _set_premium(db, user, False)
    return {"message": "Premium subscription cancelled", "user": user.to_dict()}
