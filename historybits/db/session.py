from typing import Iterator

from sqlalchemy.orm import Session

from historybits.db.base import SessionLocal


def get_db() -> Iterator[Session]:
    """One session per request; closed when the response is sent."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
