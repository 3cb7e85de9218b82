from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from historybits.db.session import get_db
from historybits.auth.models import User
from historybits.core.config import AUTH_COOKIE_NAME, COOKIE_SECURE
from historybits.core.deps import get_current_user
from historybits.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    hash_password,
    verify_password,
)
from historybits.streaks.engine import apply_streak, streak_response

router = APIRouter(prefix="/api", tags=["auth"])


class Credentials(BaseModel):
    username: str = ""
    password: str = ""


def _set_session_cookie(response: Response, user: User) -> None:
    token = create_access_token({"sub": str(user.id)})
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


# =========================
# REGISTER
# =========================
@router.post("/register")
def register(
    body: Credentials,
    response: Response,
    db: Session = Depends(get_db),
):
    username = body.username.strip()
    if not username or not body.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    if db.query(User).filter(User.username == username).first():
        raise HTTPException(status_code=400, detail="Username already exists")

    user = User(
        username=username,
        password_hash=hash_password(body.password),
    )

    db.add(user)
    db.commit()
    db.refresh(user)
    print(f"[AUTH] Registered user={user.id} username={user.username}", flush=True)

    _set_session_cookie(response, user)
    result = apply_streak(db, user)
    return {"message": "Registration successful", **streak_response(user, result)}


# =========================
# LOGIN
# =========================
@router.post("/login")
def login(
    body: Credentials,
    response: Response,
    db: Session = Depends(get_db),
):
    user = db.query(User).filter(User.username == body.username.strip()).first()

    if not user or not verify_password(body.password, user.password_hash):
        print(f"[AUTH] Invalid credentials for: {body.username}", flush=True)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    _set_session_cookie(response, user)
    result = apply_streak(db, user)
    print(f"[AUTH] Login successful for: {user.username}", flush=True)
    return {"message": "Login successful", **streak_response(user, result)}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(AUTH_COOKIE_NAME)
    return {"message": "Logout successful"}


@router.get("/user")
def current_user(user: User = Depends(get_current_user)):
    return user.to_dict()
