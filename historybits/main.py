from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from historybits.db.base import Base, engine, SessionLocal
from historybits.auth.models import User  # noqa: F401  (create_all picks these up)
from historybits.content.models import HistoricalContent, Comment, Bookmark, ContentLike  # noqa: F401
from historybits.achievements.models import Achievement, UserAchievement  # noqa: F401
from historybits.achievements.catalog import seed_achievements
from historybits.ai.openai_client import log_startup as ai_log_startup
from historybits.core.config import CORS_ORIGINS, ENABLE_DEBUG_ROUTES
from historybits.core.errors import setup_error_handlers

from historybits.auth.routes import router as auth_router
from historybits.content.routes import router as content_router
from historybits.bookmarks.routes import router as bookmarks_router
from historybits.achievements.routes import router as achievements_router
from historybits.streaks.routes import router as streak_router
from historybits.premium.routes import router as premium_router
from historybits.api.routes import router as maintenance_router
from historybits.web.debug_routes import router as debug_router


def init_db() -> None:
    """Create tables (dev convenience; production uses Alembic) and seed the achievement catalog."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_achievements(db)
    finally:
        db.close()


app = FastAPI(title="History Bits", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_error_handlers(app)

# Only expose debug routes (including diagnostics) when explicitly enabled.
if ENABLE_DEBUG_ROUTES:
    app.include_router(debug_router)

init_db()

# Log OpenAI status once at startup
ai_log_startup()

# Include routers
app.include_router(auth_router)
app.include_router(content_router)
app.include_router(bookmarks_router)
app.include_router(achievements_router)
app.include_router(streak_router)
app.include_router(premium_router)
app.include_router(maintenance_router)
