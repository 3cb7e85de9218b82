from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from historybits.achievements.catalog import list_achievements
from historybits.auth.models import User
from historybits.core.deps import get_current_user
from historybits.db.session import get_db

router = APIRouter(prefix="/api", tags=["achievements"])


@router.get("/achievements")
def get_achievements(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Full achievement catalog."""
    return list_achievements(db)
