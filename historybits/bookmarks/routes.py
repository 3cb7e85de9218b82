from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from historybits.auth.models import User
from historybits.content.models import Bookmark
from historybits.core.deps import get_current_user
from historybits.db.session import get_db

router = APIRouter(prefix="/api", tags=["bookmarks"])


@router.get("/bookmarks")
def list_bookmarks(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    rows = (
        db.query(Bookmark)
        .filter(Bookmark.user_id == user.id)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
        .all()
    )
    return [
        {
            "content": b.content.to_dict(),
            "bookmarkedAt": b.created_at.isoformat() if b.created_at else None,
        }
        for b in rows
    ]
