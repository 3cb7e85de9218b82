from typing import Optional

from fastapi import Request, Depends, HTTPException
from sqlalchemy.orm import Session

from historybits.db.session import get_db
from historybits.auth.models import User
from historybits.core.config import AUTH_COOKIE_NAME
from historybits.core.security import decode_access_token


def _extract_token(request: Request) -> Optional[str]:
    token = request.cookies.get(AUTH_COOKIE_NAME)
    if not token:
        token = request.headers.get("authorization")

    if not token:
        return None

    # Support both "Bearer <token>" and raw token values.
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def _identity_from_request(request: Request) -> Optional[int]:
    token = _extract_token(request)
    if not token:
        return None

    payload = decode_access_token(token)
    if not payload:
        return None

    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None


def get_current_user_id(request: Request) -> int:
    """Identity carried by the session token, without touching the store."""
    user_id = _identity_from_request(request)
    if user_id is None:
        print(f"[AUTH] reject reason=no_session path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        print(f"[AUTH] reject reason=user_not_found user_id={user_id}", flush=True)
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def get_optional_user(
    request: Request,
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Same as get_current_user but anonymous callers get None instead of a 401."""
    user_id = _identity_from_request(request)
    if user_id is None:
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_premium_user(
    user: User = Depends(get_current_user)
) -> User:
    """Dependency to ensure the user has an active premium flag."""
    if not user.premium:
        raise HTTPException(status_code=403, detail="Premium subscription required")
    return user
