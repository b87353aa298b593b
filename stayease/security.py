from typing import Optional
from passlib.context import CryptContext
from itsdangerous import URLSafeSerializer, BadSignature
from fastapi import Request, Response, Depends, HTTPException
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .models import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
serializer = URLSafeSerializer(settings.SECRET_KEY, salt="stayease-session")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def set_session(response: Response, user_id: int):
    token = serializer.dumps({"uid": user_id})
    is_production = getattr(settings, "ENVIRONMENT", "development") == "production"
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=is_production,
        path="/",
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60
    )


def clear_session(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")


def get_current_user_id(request: Request) -> Optional[int]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        data = serializer.loads(token)
        return int(data.get("uid"))
    except (BadSignature, ValueError, TypeError):
        return None


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    user_id = get_current_user_id(request)
    if not user_id:
        return None
    return db.get(User, user_id)


def require_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """
    Dependency for routes that need a session.
    A missing cookie and a cookie pointing at a vanished user both answer 401.
    """
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_owner(owner_id: int, user: User) -> None:
    if owner_id != user.id:
        raise HTTPException(status_code=403, detail="Forbidden")
