from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from historybits.core.config import DATABASE_URL as _RAW_DATABASE_URL


def _build_database_url(url: str) -> str:
    """
    Normalize the configured database URL.

    - Fallback to a local SQLite file for development (handled in config).
    - Normalize legacy postgres:// URLs to SQLAlchemy's postgresql+psycopg2://.
    """
    url = url.strip()

    if url.startswith("postgres://"):
        # SQLAlchemy 2.x expects a driver-qualified URL
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)

    return url


DATABASE_URL = _build_database_url(_RAW_DATABASE_URL)

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # Needed for SQLite when used with FastAPI in a single process
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args, future=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def describe_database() -> dict:
    """Backend, password-masked URL and, for SQLite, the file on disk."""
    url = engine.url
    info = {
        "backend": url.get_backend_name(),
        "url": url.render_as_string(hide_password=True),
    }

    if info["backend"] == "sqlite":
        db_path = Path(url.database or "").resolve()
        exists = db_path.exists()
        info["sqlite_path"] = str(db_path)
        info["sqlite_exists"] = exists
        info["sqlite_size_bytes"] = db_path.stat().st_size if exists else 0
    else:
        info["host"] = url.host
        info["port"] = url.port
        info["database"] = url.database

    return info


# Helpful DB diagnostics printed once at startup
try:
    _info = describe_database()
    print(f"[DB] Using database backend={_info['backend']} url={_info['url']}", flush=True)
except OSError as exc:
    # Never crash app on logging
    print("[DB] Failed to log DB diagnostics:", repr(exc), flush=True)
