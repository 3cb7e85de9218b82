"""
Deployment diagnostics. Only mounted when ENABLE_DEBUG_ROUTES=1; payloads
never carry the database password or the full OpenAI key.
"""
from fastapi import APIRouter

from historybits.ai.openai_client import key_present, key_fingerprint, get_last_error
from historybits.db.base import describe_database

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/diagnostics/db")
def db_diagnostics():
    return describe_database()


@router.get("/diagnostics/ai")
def ai_diagnostics():
    return {
        "key_present": key_present(),
        "key_fingerprint": key_fingerprint(),
        "last_error": get_last_error(),
    }
