from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func

from historybits.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String, unique=True, index=True, nullable=False)

    password_hash = Column(String, nullable=False)

    # Flipped by /api/user/upgrade and /api/user/cancel-premium, no payment check
    premium = Column(Boolean, nullable=False, default=False)

    # Consecutive-activity counter, never negative (see historybits.streaks.engine)
    streak = Column(Integer, nullable=False, default=0)
    last_login = Column(DateTime(timezone=True), server_default=func.now())

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "premium": bool(self.premium),
            "streak": self.streak or 0,
            "lastLogin": self.last_login.isoformat() if self.last_login else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
