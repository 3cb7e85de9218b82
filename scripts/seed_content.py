"""
Maintenance script: replace the content table with the built-in catalog.

Same effect as POST /api/seed-content:
- Deletes ALL content, plus comments, bookmarks and likes that point at it
- Inserts the catalog from historybits.content.seed
- Run manually when you decide
"""
from sqlalchemy.orm import Session

from historybits.db.base import Base, engine, SessionLocal
from historybits.auth.models import User  # noqa: F401
from historybits.content.seed import replace_content


def seed_content():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()

    try:
        count = replace_content(db)
        print("✅ Content seeding complete")
        print(f"   Inserted: {count}")
    except Exception as e:
        db.rollback()
        print("❌ Error while seeding content")
        print(str(e))
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_content()
