import logging
from fastapi import APIRouter, Depends, Request, HTTPException

from ..config import settings
from ..limiter import limiter
from ..repository import Repository, get_repository
from ..schemas import WaitlistIn, WaitlistOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["waitlist"])


@router.post("/waitlist", response_model=WaitlistOut, status_code=201)
@limiter.limit(settings.RATE_LIMIT_WAITLIST)
def api_join_waitlist(request: Request, payload: WaitlistIn, repo: Repository = Depends(get_repository)):
    email = payload.email.lower()
    if repo.get_waitlist_by_email(email):
        raise HTTPException(status_code=400, detail="Email already registered in waitlist")
    entry = repo.add_to_waitlist(email=email, name=payload.name)
    logger.info("Waitlist signup #%s", entry.id)
    return entry
