from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from historybits.db.base import Base
from historybits.auth.models import User


def _iso(value):
    return value.isoformat() if value else None


class HistoricalContent(Base):
    __tablename__ = "historical_content"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    period = Column(String(255), nullable=False)    # e.g. "Ancient Rome", "1920s"
    category = Column(String(255), nullable=False)  # e.g. "Science", "Warfare"

    hook = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    takeaway = Column(Text, nullable=False)

    image_url = Column(String, nullable=True)

    # Only like/unlike touch this
    likes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "period": self.period,
            "category": self.category,
            "hook": self.hook,
            "content": self.content,
            "takeaway": self.takeaway,
            "imageUrl": self.image_url,
            "likes": self.likes or 0,
            "createdAt": _iso(self.created_at),
        }


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content_id = Column(Integer, ForeignKey("historical_content.id"), nullable=False, index=True)

    text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship(User, lazy="joined")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "contentId": self.content_id,
            "text": self.text,
            "username": self.user.username if self.user else None,
            "createdAt": _iso(self.created_at),
        }


# ======================================================
# 🔖 BOOKMARKS / ❤️ LIKES (existence-only toggles)
# ======================================================
class Bookmark(Base):
    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content_id = Column(Integer, ForeignKey("historical_content.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    content = relationship("HistoricalContent")

    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_bookmark_user_content"),
    )


class ContentLike(Base):
    __tablename__ = "content_likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content_id = Column(Integer, ForeignKey("historical_content.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_like_user_content"),
    )
