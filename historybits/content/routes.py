from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from historybits.db.session import get_db
from historybits.auth.models import User
from historybits.content.models import HistoricalContent, Comment, Bookmark, ContentLike
from historybits.content.generator import generate_and_store, generate_and_store_many
from historybits.core.config import GENERATE_BATCH_DEFAULT, GENERATE_BATCH_MAX
from historybits.core.deps import get_current_user, get_optional_user, get_premium_user

router = APIRouter(prefix="/api/content", tags=["content"])


class CommentIn(BaseModel):
    text: Optional[str] = None


class GenerateIn(BaseModel):
    topic: Optional[str] = None
    period: Optional[str] = None
    category: Optional[str] = None


class GenerateBatchIn(GenerateIn):
    count: int = GENERATE_BATCH_DEFAULT


def is_premium_locked(index: int, viewer: Optional[User]) -> bool:
    """Every third card in the feed is premium-only for non-premium viewers."""
    if viewer is not None and viewer.premium:
        return False
    return (index + 1) % 3 == 0


def get_content_or_404(db: Session, content_id: int) -> HistoricalContent:
    content = db.query(HistoricalContent).filter(HistoricalContent.id == content_id).first()
    if not content:
        raise HTTPException(status_code=404, detail="Content not found")
    return content


def _is_bookmarked(db: Session, user_id: int, content_id: int) -> bool:
    return (
        db.query(Bookmark)
        .filter(Bookmark.user_id == user_id, Bookmark.content_id == content_id)
        .first()
        is not None
    )


def _find_like(db: Session, user_id: int, content_id: int) -> Optional[ContentLike]:
    return (
        db.query(ContentLike)
        .filter(ContentLike.user_id == user_id, ContentLike.content_id == content_id)
        .first()
    )


def _comments_for(db: Session, content_id: int) -> list:
    rows = (
        db.query(Comment)
        .filter(Comment.content_id == content_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )
    return [c.to_dict() for c in rows]


# ======================================================
# LIST / FETCH
# ======================================================
@router.get("")
def list_content(
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_optional_user),
):
    rows = (
        db.query(HistoricalContent)
        .order_by(HistoricalContent.created_at.desc(), HistoricalContent.id.desc())
        .all()
    )
    return [
        {**row.to_dict(), "isPremiumLocked": is_premium_locked(index, viewer)}
        for index, row in enumerate(rows)
    ]


@router.get("/{content_id}")
def get_content(
    content_id: int,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_optional_user),
):
    """
    Single content row. Signed-in callers also get the comment thread and
    their own bookmark/like state.
    """
    content = get_content_or_404(db, content_id)
    data = content.to_dict()

    if viewer is not None:
        data["comments"] = _comments_for(db, content_id)
        data["isBookmarked"] = _is_bookmarked(db, viewer.id, content_id)
        data["isLiked"] = _find_like(db, viewer.id, content_id) is not None

    return data


@router.get("/{content_id}/comments")
def list_comments(content_id: int, db: Session = Depends(get_db)):
    get_content_or_404(db, content_id)
    return _comments_for(db, content_id)


@router.get("/{content_id}/bookmarked")
def bookmark_state(
    content_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    get_content_or_404(db, content_id)
    return {"bookmarked": _is_bookmarked(db, user.id, content_id)}


# ======================================================
# LIKES (one per user, idempotent)
# ======================================================
@router.post("/{content_id}/like")
def like_content(
    content_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    content = get_content_or_404(db, content_id)

    if _find_like(db, user.id, content_id) is None:
        db.add(ContentLike(user_id=user.id, content_id=content_id))
        db.query(HistoricalContent).filter(HistoricalContent.id == content_id).update(
            {HistoricalContent.likes: HistoricalContent.likes + 1},
            synchronize_session=False,
        )
        db.commit()
        db.refresh(content)

    return {**content.to_dict(), "isLiked": True}


@router.post("/{content_id}/unlike")
def unlike_content(
    content_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    content = get_content_or_404(db, content_id)

    like = _find_like(db, user.id, content_id)
    if like is not None:
        db.delete(like)
        db.query(HistoricalContent).filter(
            HistoricalContent.id == content_id,
            HistoricalContent.likes > 0,
        ).update(
            {HistoricalContent.likes: HistoricalContent.likes - 1},
            synchronize_session=False,
        )
        db.commit()
        db.refresh(content)

    return {**content.to_dict(), "isLiked": False}


# ======================================================
# BOOKMARK TOGGLE
# ======================================================
@router.post("/{content_id}/bookmark")
def toggle_bookmark(
    content_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    get_content_or_404(db, content_id)

    existing = (
        db.query(Bookmark)
        .filter(Bookmark.user_id == user.id, Bookmark.content_id == content_id)
        .first()
    )

    if existing:
        db.delete(existing)
        db.commit()
        return {"bookmarked": False, "message": "Bookmark removed successfully"}

    db.add(Bookmark(user_id=user.id, content_id=content_id))
    db.commit()
    return {"bookmarked": True, "message": "Content bookmarked successfully"}


# ======================================================
# COMMENTS
# ======================================================
@router.post("/{content_id}/comment")
def create_comment(
    content_id: int,
    body: CommentIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    get_content_or_404(db, content_id)

    text = (body.text or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="Comment text is required")

    comment = Comment(user_id=user.id, content_id=content_id, text=text)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment.to_dict()


# ======================================================
# AI GENERATION
# ======================================================
@router.post("/generate")
def generate_content(
    body: Optional[GenerateIn] = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    body = body or GenerateIn()
    content = generate_and_store(db, topic=body.topic, period=body.period, category=body.category)
    print(f"[CONTENT] user={user.id} generated content={content.id}", flush=True)
    return content.to_dict()


@router.post("/generate-batch")
def generate_content_batch(
    body: Optional[GenerateBatchIn] = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_premium_user),
):
    body = body or GenerateBatchIn()
    if body.count < 1 or body.count > GENERATE_BATCH_MAX:
        raise HTTPException(
            status_code=400,
            detail=f"count must be between 1 and {GENERATE_BATCH_MAX}",
        )

    created = generate_and_store_many(
        db, body.count, topic=body.topic, period=body.period, category=body.category
    )
    print(f"[CONTENT] user={user.id} generated batch of {len(created)}", flush=True)
    return [c.to_dict() for c in created]
