import logging
from typing import List
from fastapi import APIRouter, Depends, Response, HTTPException

from ..models import User, Review
from ..repository import Repository, get_repository
from ..schemas import ReviewIn, ReviewOut, ReviewUpdateIn
from ..security import require_user, require_owner
from .properties_api import property_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["reviews"])


def review_or_404(repo: Repository, review_id: int) -> Review:
    review = repo.get_review(review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.get("/properties/{property_id}/reviews", response_model=List[ReviewOut])
def api_list_reviews(property_id: int, repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    return repo.list_reviews_by_property(prop.id)


@router.post("/properties/{property_id}/reviews", response_model=ReviewOut, status_code=201)
def api_create_review(property_id: int, payload: ReviewIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    if repo.get_review_by_author(prop.id, user.id):
        raise HTTPException(status_code=400, detail="You have already reviewed this property")
    review = repo.create_review(property_id=prop.id, user_id=user.id, rating=payload.rating, comment=payload.comment)
    logger.info("User %s reviewed property %s (%s/5)", user.id, prop.id, review.rating)
    return review


@router.get("/reviews/{review_id}", response_model=ReviewOut)
def api_get_review(review_id: int, repo: Repository = Depends(get_repository)):
    return review_or_404(repo, review_id)


@router.put("/reviews/{review_id}", response_model=ReviewOut)
def api_update_review(review_id: int, payload: ReviewUpdateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    review = review_or_404(repo, review_id)
    require_owner(review.user_id, user)
    return repo.update_review(review, payload.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/reviews/{review_id}", status_code=204)
def api_delete_review(review_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    review = review_or_404(repo, review_id)
    require_owner(review.user_id, user)
    repo.delete_review(review)
    return Response(status_code=204)
