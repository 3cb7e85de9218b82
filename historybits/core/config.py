"""
Configuration constants for the application.
"""
import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Database URL; local SQLite file when nothing is configured.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./local.db")

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()

# Only expose debug routes (including diagnostics) when explicitly enabled.
ENABLE_DEBUG_ROUTES = _env_flag("ENABLE_DEBUG_ROUTES")

# Auth cookie
AUTH_COOKIE_NAME = "access_token"
COOKIE_SECURE = _env_flag("COOKIE_SECURE")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# Streak grace window: one elapsed window increments, more than one resets.
STREAK_WINDOW = timedelta(minutes=1)

# OpenAI API Key for content generation
# IMPORTANT: Do NOT hardcode keys in code or commit them to git.
# Set OPENAI_API_KEY in your environment (or hosting provider env vars).
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))

# Upper bound for a single premium batch generation request
GENERATE_BATCH_MAX = int(os.getenv("GENERATE_BATCH_MAX", "10"))
GENERATE_BATCH_DEFAULT = 3
