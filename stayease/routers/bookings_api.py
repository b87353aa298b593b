import logging
from typing import List
from fastapi import APIRouter, Depends, Response, HTTPException

from ..models import User, Booking, BookingStatus
from ..repository import Repository, get_repository
from ..schemas import BookingOut, BookingCreateIn, BookingUpdateIn
from ..security import require_user, require_owner
from ..services.pricing import quote_stay
from .properties_api import property_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

# ==== Helpers ====

def booking_or_404(repo: Repository, booking_id: int) -> Booking:
    b = repo.get_booking(booking_id)
    if not b:
        raise HTTPException(status_code=404, detail="Booking not found")
    return b


def ensure_available(repo: Repository, property_id: int, check_in, check_out, exclude_id: int | None = None) -> None:
    conflicts = repo.find_overlapping_bookings(property_id, check_in, check_out, exclude_id=exclude_id)
    if conflicts:
        raise HTTPException(status_code=409, detail="Conflict: overlapping booking exists")

# ==== Bookings ====

@router.get("", response_model=List[BookingOut])
def api_bookings(user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    return repo.list_bookings_by_user(user.id)


@router.get("/{booking_id}", response_model=BookingOut)
def api_get_booking(booking_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    b = booking_or_404(repo, booking_id)
    # Renter and the listing's host may both look at a booking
    if user.id not in (b.user_id, b.listing.host_id):
        raise HTTPException(status_code=403, detail="Forbidden")
    return b


@router.post("", response_model=BookingOut, status_code=201)
def api_create_booking(payload: BookingCreateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    prop = property_or_404(repo, payload.property_id)
    s = payload.check_in_date
    e = payload.check_out_date
    quote = quote_stay(s, e, prop.price)
    ensure_available(repo, prop.id, s, e)
    b = repo.create_booking(
        property_id=prop.id,
        user_id=user.id,
        check_in_date=s,
        check_out_date=e,
        guests=payload.guests,
        total_price=quote.total,
        status=BookingStatus.PENDING,
    )
    logger.info("Booking %s created for property %s: %s night(s), total %s", b.id, prop.id, quote.nights, quote.total)
    return b


@router.put("/{booking_id}", response_model=BookingOut)
def api_update_booking(booking_id: int, payload: BookingUpdateIn, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    b = booking_or_404(repo, booking_id)
    require_owner(b.user_id, user)
    if payload.status == BookingStatus.CONFIRMED:
        raise HTTPException(status_code=403, detail="Only the host can confirm a booking")
    if b.status == BookingStatus.CONFIRMED and payload.status == BookingStatus.PENDING:
        raise HTTPException(status_code=403, detail="A confirmed booking cannot be set back to pending")

    changes = {}
    if payload.guests is not None:
        changes["guests"] = payload.guests
    status = payload.status if payload.status is not None else b.status

    s = payload.check_in_date if payload.check_in_date is not None else b.check_in_date
    e = payload.check_out_date if payload.check_out_date is not None else b.check_out_date
    dates_changed = (s, e) != (b.check_in_date, b.check_out_date)
    if dates_changed:
        quote = quote_stay(s, e, b.listing.price)
        changes.update(check_in_date=s, check_out_date=e, total_price=quote.total)
        # new dates need the host's confirmation again
        if status == BookingStatus.CONFIRMED:
            status = BookingStatus.PENDING
    if status != b.status:
        changes["status"] = status

    reactivated = b.status == BookingStatus.CANCELLED and status == BookingStatus.PENDING
    if status != BookingStatus.CANCELLED and (dates_changed or reactivated):
        ensure_available(repo, b.property_id, s, e, exclude_id=b.id)

    return repo.update_booking(b, changes)


@router.post("/{booking_id}/confirm", response_model=BookingOut)
def api_confirm_booking(booking_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    b = booking_or_404(repo, booking_id)
    require_owner(b.listing.host_id, user)
    if b.status == BookingStatus.CANCELLED:
        raise HTTPException(status_code=400, detail="Cancelled bookings cannot be confirmed")
    return repo.update_booking(b, {"status": BookingStatus.CONFIRMED})


@router.delete("/{booking_id}", status_code=204)
def api_delete_booking(booking_id: int, user: User = Depends(require_user), repo: Repository = Depends(get_repository)):
    b = booking_or_404(repo, booking_id)
    require_owner(b.user_id, user)
    repo.delete_booking(b)
    return Response(status_code=204)
