"""
Unified OpenAI client.

Everything that talks to OpenAI goes through here:
    from historybits.ai.openai_client import get_client, key_present, key_fingerprint

- The API key is read ONCE and stripped of whitespace.
- A single client instance is reused.
"""
from typing import Optional

import openai

from historybits.core.config import OPENAI_API_KEY, OPENAI_TIMEOUT

_KEY: str = OPENAI_API_KEY.strip()

# Track last error for diagnostics
_last_error: Optional[str] = None

# Lazily-created singleton
_client: Optional[openai.OpenAI] = None


def key_present() -> bool:
    return bool(_KEY)


def key_fingerprint() -> str:
    """Return masked key for safe logging: sk-xxxx...1234"""
    if not _KEY:
        return "(not set)"
    if len(_KEY) <= 10:
        return _KEY[:2] + "***"
    return _KEY[:6] + "..." + _KEY[-4:]


def get_client() -> Optional[openai.OpenAI]:
    """
    Return the shared OpenAI client, or None if the key is missing.
    """
    global _client
    if not _KEY:
        return None
    if _client is None:
        _client = openai.OpenAI(api_key=_KEY, timeout=OPENAI_TIMEOUT)
    return _client


def set_last_error(msg: str):
    global _last_error
    _last_error = msg


def get_last_error() -> Optional[str]:
    return _last_error


def log_startup():
    """Print one-time startup diagnostics."""
    print(f"[AI] OPENAI_API_KEY present: {key_present()}", flush=True)
    print(f"[AI] key fingerprint: {key_fingerprint()}", flush=True)
    print(f"[AI] openai library: {openai.__version__}", flush=True)
