import logging
from fastapi import APIRouter, Depends, Request, Response, HTTPException

from ..config import settings
from ..limiter import limiter
from ..models import User
from ..repository import Repository, get_repository
from ..schemas import UserOut, UserPublicOut, RegisterIn, LoginIn, UserUpdateIn
from ..security import hash_password, verify_password, set_session, clear_session, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=UserOut, status_code=201)
@limiter.limit(settings.RATE_LIMIT_AUTH)
def api_register(request: Request, payload: RegisterIn, response: Response, repo: Repository = Depends(get_repository)):
    if repo.get_user_by_login(payload.login):
        raise HTTPException(status_code=400, detail="Login already taken")
    email = payload.email.lower()
    if repo.get_user_by_email(email):
        raise HTTPException(status_code=400, detail="Email already registered")
    user = repo.create_user(
        login=payload.login,
        hashed_password=hash_password(payload.password),
        email=email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone_number=payload.phone_number,
        is_host=payload.is_host,
    )
    logger.info("Registered user %s (id=%s)", user.login, user.id)
    set_session(response, user.id)
    return user


@router.post("/login", response_model=UserOut)
@limiter.limit(settings.RATE_LIMIT_AUTH)
def api_login(request: Request, payload: LoginIn, response: Response, repo: Repository = Depends(get_repository)):
    user = repo.get_user_by_login(payload.login)
    if not user and "@" in payload.login:
        user = repo.get_user_by_email(payload.login.lower())
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=400, detail="Invalid login or password")
    set_session(response, user.id)
    return user


@router.post("/logout")
def api_logout(response: Response):
    clear_session(response)
    return {"ok": True}


@router.get("/user", response_model=UserOut)
def api_me(user: User = Depends(require_user)):
    return user


@router.put("/user", response_model=UserOut)
def api_update_me(payload: UserUpdateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    changes = payload.model_dump(exclude_unset=True, exclude_none=True, exclude={"password", "current_password", "email"})
    if payload.email is not None:
        email = payload.email.lower()
        other = repo.get_user_by_email(email)
        if other and other.id != user.id:
            raise HTTPException(status_code=400, detail="Email already registered")
        changes["email"] = email
    if payload.password is not None:
        if not payload.current_password or not verify_password(payload.current_password, user.hashed_password):
            raise HTTPException(status_code=400, detail="Incorrect current password")
        changes["hashed_password"] = hash_password(payload.password)
    return repo.update_user(user, changes)


@router.get("/users/{user_id}", response_model=UserPublicOut)
def api_get_user(user_id: int, repo: Repository = Depends(get_repository)):
    user = repo.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
