from datetime import datetime
from typing import Optional
from sqlalchemy import Integer, String, ForeignKey, DateTime, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db import Base
from ..services.ratings import average_rating

class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    host_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    rooms: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    area: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    has_wifi: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_parking: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_pool: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Curated rating stored x10 (49 == 4.9); guest reviews are aggregated separately
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    host: Mapped["User"] = relationship(back_populates="properties")
    photos: Mapped[list["Photo"]] = relationship(back_populates="listing", cascade="all, delete-orphan", order_by="Photo.id")
    reviews: Mapped[list["Review"]] = relationship(back_populates="listing", cascade="all, delete-orphan", order_by="Review.id")
    bookings: Mapped[list["Booking"]] = relationship(back_populates="listing", cascade="all, delete-orphan")

    @property
    def review_count(self) -> int:
        return len(self.reviews)

    @property
    def average_rating(self) -> Optional[float]:
        if not self.reviews:
            return None
        return round(average_rating(r.rating for r in self.reviews), 2)

    def __repr__(self) -> str:
        return f"<Property id={self.id} title={self.title!r}>"
