"""
Maintenance API routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from historybits.content.seed import replace_content
from historybits.db.session import get_db

router = APIRouter(prefix="/api", tags=["maintenance"])


@router.post("/seed-content")
def seed_content(db: Session = Depends(get_db)):
    """Replace the whole content table with the built-in catalog."""
    count = replace_content(db)
    return {"message": "Content seeded successfully", "count": count}
