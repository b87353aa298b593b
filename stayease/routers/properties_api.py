import logging
from dataclasses import asdict
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, Response, HTTPException

from ..models import User, Property
from ..repository import Repository, get_repository
from ..schemas import (
    PropertyOut, PropertyDetailOut, PropertyCreateIn, PropertyUpdateIn, PropertyFilter,
    PropertySearchIn, PropertyPageOut, QuoteIn, QuoteOut, RatingSummaryOut, BookingOut,
)
from ..security import require_user, require_owner
from ..services.pricing import quote_stay
from ..services.ratings import summarize, listing_rating
from ..services.search import filter_properties, paginate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["properties"])

# ==== Helpers ====

def property_or_404(repo: Repository, property_id: int) -> Property:
    prop = repo.get_property(property_id)
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


def filter_params(
    city: Optional[str] = None,
    min_price: Optional[int] = Query(None, ge=0),
    max_price: Optional[int] = Query(None, ge=0),
    min_rooms: Optional[int] = Query(None, ge=0),
    min_area: Optional[int] = Query(None, ge=0),
    has_wifi: Optional[bool] = None,
    has_parking: Optional[bool] = None,
    has_pool: Optional[bool] = None,
    keyword: Optional[str] = None,
) -> PropertyFilter:
    return PropertyFilter(
        city=city,
        min_price=min_price,
        max_price=max_price,
        min_rooms=min_rooms,
        min_area=min_area,
        has_wifi=has_wifi,
        has_parking=has_parking,
        has_pool=has_pool,
        keyword=keyword,
    )

# ==== Listings ====

@router.get("", response_model=List[PropertyOut])
def api_list_properties(criteria: PropertyFilter = Depends(filter_params), host_id: Optional[int] = None, repo: Repository = Depends(get_repository)):
    return filter_properties(repo.list_properties(host_id=host_id), criteria)


@router.post("/search", response_model=PropertyPageOut)
def api_search_properties(payload: PropertySearchIn, repo: Repository = Depends(get_repository)):
    matched = filter_properties(repo.list_properties(), payload)
    page = paginate(matched, payload.page, payload.page_size)
    return {
        "items": page.items,
        "page": page.page,
        "page_size": page.page_size,
        "total": page.total,
        "pages": page.pages,
    }


@router.get("/{property_id}", response_model=PropertyDetailOut)
def api_get_property(property_id: int, repo: Repository = Depends(get_repository)):
    return property_or_404(repo, property_id)


@router.post("", response_model=PropertyDetailOut, status_code=201)
def api_create_property(payload: PropertyCreateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    fields = payload.model_dump(exclude={"photos"})
    prop = repo.create_property(host_id=user.id, photo_urls=[str(url) for url in payload.photos], **fields)
    if not user.is_host:
        repo.update_user(user, {"is_host": True})
    logger.info("User %s listed property %s", user.id, prop.id)
    return prop


@router.put("/{property_id}", response_model=PropertyDetailOut)
def api_update_property(property_id: int, payload: PropertyUpdateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    require_owner(prop.host_id, user)
    return repo.update_property(prop, payload.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/{property_id}", status_code=204)
def api_delete_property(property_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    require_owner(prop.host_id, user)
    repo.delete_property(prop)
    logger.info("User %s removed property %s", user.id, property_id)
    return Response(status_code=204)

# ==== Pricing, ratings & host views ====

@router.post("/{property_id}/quote", response_model=QuoteOut)
def api_quote_stay(property_id: int, payload: QuoteIn, repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    quote = quote_stay(payload.check_in_date, payload.check_out_date, prop.price)
    return QuoteOut(
        property_id=prop.id,
        check_in_date=payload.check_in_date,
        check_out_date=payload.check_out_date,
        nights=quote.nights,
        nightly_price=quote.nightly_price,
        total=quote.total,
    )


@router.get("/{property_id}/rating", response_model=RatingSummaryOut)
def api_property_rating(property_id: int, repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    summary = summarize(r.rating for r in repo.list_reviews_by_property(prop.id))
    return RatingSummaryOut(
        property_id=prop.id,
        average=summary.average,
        count=summary.count,
        display=summary.display,
        stars=asdict(summary.stars),
        listing_rating=listing_rating(prop.rating),
    )


@router.get("/{property_id}/bookings", response_model=List[BookingOut])
def api_property_bookings(property_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, property_id)
    require_owner(prop.host_id, user)
    return repo.list_bookings_by_property(prop.id)
