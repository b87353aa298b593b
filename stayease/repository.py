"""
Persistence operations, one group per entity.

Routes receive a ``Repository`` through ``get_repository`` instead of touching
the session directly, so the store behind it (SQLite in memory, a file, or a
server database) is chosen by ``DATABASE_URL`` or swapped with a dependency
override without changing any caller.
"""
import logging
from datetime import date
from typing import Any, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .db import get_db
from .errors import DuplicateEntryError
from .models import User, Property, Photo, Booking, BookingStatus, Review, WaitlistEntry

logger = logging.getLogger(__name__)


class Repository:
    def __init__(self, db: Session):
        self.db = db

    # ==== Helpers ====

    def _save(self, obj, duplicate_message: str = "Entry already exists"):
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Rejected duplicate %s: %s", type(obj).__name__, exc.orig)
            raise DuplicateEntryError(duplicate_message) from exc
        self.db.refresh(obj)
        return obj

    def _apply(self, obj, changes: dict[str, Any], duplicate_message: str = "Entry already exists"):
        for key, value in changes.items():
            setattr(obj, key, value)
        return self._save(obj, duplicate_message)

    def _delete(self, obj) -> None:
        self.db.delete(obj)
        self.db.commit()

    # ==== Users ====

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_user_by_login(self, login: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.login == login)).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def create_user(self, **fields) -> User:
        return self._save(User(**fields), "Login or email already registered")

    def update_user(self, user: User, changes: dict[str, Any]) -> User:
        return self._apply(user, changes, "Email already registered")

    # ==== Properties ====

    def get_property(self, property_id: int) -> Optional[Property]:
        return self.db.get(Property, property_id)

    def list_properties(self, host_id: Optional[int] = None) -> list[Property]:
        q = select(Property).order_by(Property.id.asc())
        if host_id is not None:
            q = q.where(Property.host_id == host_id)
        return list(self.db.scalars(q))

    def create_property(self, host_id: int, photo_urls: Optional[list[str]] = None, **fields) -> Property:
        prop = Property(host_id=host_id, **fields)
        for url in photo_urls or []:
            prop.photos.append(Photo(image_url=url))
        return self._save(prop)

    def update_property(self, prop: Property, changes: dict[str, Any]) -> Property:
        return self._apply(prop, changes)

    def delete_property(self, prop: Property) -> None:
        self._delete(prop)

    # ==== Photos ====

    def get_photo(self, photo_id: int) -> Optional[Photo]:
        return self.db.get(Photo, photo_id)

    def list_photos(self, property_id: int) -> list[Photo]:
        q = select(Photo).where(Photo.property_id == property_id).order_by(Photo.id.asc())
        return list(self.db.scalars(q))

    def add_photo(self, property_id: int, image_url: str) -> Photo:
        return self._save(Photo(property_id=property_id, image_url=image_url))

    def delete_photo(self, photo: Photo) -> None:
        self._delete(photo)

    # ==== Bookings ====

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.db.get(Booking, booking_id)

    def list_bookings_by_user(self, user_id: int) -> list[Booking]:
        q = select(Booking).where(Booking.user_id == user_id).order_by(Booking.check_in_date.desc())
        return list(self.db.scalars(q))

    def list_bookings_by_property(self, property_id: int) -> list[Booking]:
        q = select(Booking).where(Booking.property_id == property_id).order_by(Booking.check_in_date.asc())
        return list(self.db.scalars(q))

    def find_overlapping_bookings(self, property_id: int, check_in: date, check_out: date, exclude_id: Optional[int] = None) -> list[Booking]:
        """Live bookings on the property whose stay intersects [check_in, check_out)."""
        q = select(Booking).where(
            Booking.property_id == property_id,
            Booking.status != BookingStatus.CANCELLED,
            Booking.check_in_date < check_out,
            Booking.check_out_date > check_in,
        )
        if exclude_id is not None:
            q = q.where(Booking.id != exclude_id)
        return list(self.db.scalars(q))

    def create_booking(self, **fields) -> Booking:
        return self._save(Booking(**fields))

    def update_booking(self, booking: Booking, changes: dict[str, Any]) -> Booking:
        return self._apply(booking, changes)

    def delete_booking(self, booking: Booking) -> None:
        self._delete(booking)

    # ==== Reviews ====

    def get_review(self, review_id: int) -> Optional[Review]:
        return self.db.get(Review, review_id)

    def list_reviews_by_property(self, property_id: int) -> list[Review]:
        q = select(Review).where(Review.property_id == property_id).order_by(Review.created_at.desc(), Review.id.desc())
        return list(self.db.scalars(q))

    def list_reviews_by_user(self, user_id: int) -> list[Review]:
        q = select(Review).where(Review.user_id == user_id).order_by(Review.id.asc())
        return list(self.db.scalars(q))

    def get_review_by_author(self, property_id: int, user_id: int) -> Optional[Review]:
        q = select(Review).where(Review.property_id == property_id, Review.user_id == user_id)
        return self.db.scalars(q).first()

    def create_review(self, **fields) -> Review:
        return self._save(Review(**fields), "You have already reviewed this property")

    def update_review(self, review: Review, changes: dict[str, Any]) -> Review:
        return self._apply(review, changes)

    def delete_review(self, review: Review) -> None:
        self._delete(review)

    # ==== Waitlist ====

    def get_waitlist_by_email(self, email: str) -> Optional[WaitlistEntry]:
        return self.db.scalars(select(WaitlistEntry).where(WaitlistEntry.email == email)).first()

    def add_to_waitlist(self, email: str, name: str) -> WaitlistEntry:
        return self._save(WaitlistEntry(email=email, name=name), "Email already registered in waitlist")


def get_repository(db: Session = Depends(get_db)) -> Repository:
    return Repository(db)
