from typing import List
from fastapi import APIRouter, Depends, Response, HTTPException

from ..models import User
from ..repository import Repository, get_repository
from ..schemas import PhotoIn, PhotoOut
from ..security import require_user, require_owner
from .properties_api import property_or_404

router = APIRouter(prefix="/api", tags=["photos"])


@router.get("/properties/{property_id}/photos", response_model=List[PhotoOut])
def api_list_photos(property_id: int, repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    return repo.list_photos(prop.id)


@router.post("/properties/{property_id}/photos", response_model=PhotoOut, status_code=201)
def api_add_photo(property_id: int, payload: PhotoIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    require_owner(prop.host_id, user)
    return repo.add_photo(prop.id, str(payload.image_url))


@router.get("/photos/{photo_id}", response_model=PhotoOut)
def api_get_photo(photo_id: int, repo: Repository = Depends(get_repository)):
    photo = repo.get_photo(photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    return photo


@router.delete("/photos/{photo_id}", status_code=204)
def api_delete_photo(photo_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    photo = repo.get_photo(photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    require_owner(photo.listing.host_id, user)
    repo.delete_photo(photo)
    return Response(status_code=204)
