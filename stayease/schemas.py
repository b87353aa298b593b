from datetime import date, datetime
from typing import Optional, List
from pydantic import BaseModel, EmailStr, Field, HttpUrl
from pydantic.alias_generators import to_camel

from .config import settings
from .models import BookingStatus

# ==== Base ====

class CamelIn(BaseModel):
    """Request bodies accept snake_case and the camelCase keys older clients send."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True

# ==== Users ====

class UserOut(BaseModel):
    id: int
    login: str
    email: str
    first_name: str
    last_name: str
    phone_number: str
    is_host: bool
    created_at: datetime

    class Config:
        from_attributes = True

class UserPublicOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    is_host: bool

    class Config:
        from_attributes = True

class RegisterIn(CamelIn):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone_number: str = Field(min_length=10, max_length=50)
    login: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6, max_length=128)
    is_host: bool = False

class LoginIn(CamelIn):
    login: str = Field(min_length=1, description="Login or email")
    password: str = Field(min_length=1)

class UserUpdateIn(CamelIn):
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(default=None, min_length=10, max_length=50)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    current_password: Optional[str] = None

# ==== Properties & Photos ====

class PhotoOut(BaseModel):
    id: int
    property_id: int
    image_url: str
    created_at: datetime

    class Config:
        from_attributes = True

class PhotoIn(CamelIn):
    image_url: HttpUrl

class PropertyOut(BaseModel):
    id: int
    host_id: int
    title: str
    description: str
    city: str
    price: int
    rooms: int
    bathrooms: int
    area: int
    has_wifi: bool
    has_parking: bool
    has_pool: bool
    rating: Optional[int] = None
    image_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class PropertyDetailOut(PropertyOut):
    photos: List[PhotoOut] = []
    average_rating: Optional[float] = None
    review_count: int = 0

class PropertyCreateIn(CamelIn):
    title: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=10)
    city: str = Field(min_length=2, max_length=200)
    price: int = Field(ge=1)
    rooms: int = Field(ge=1)
    bathrooms: int = Field(default=1, ge=0)
    area: int = Field(ge=10)
    has_wifi: bool = False
    has_parking: bool = False
    has_pool: bool = False
    rating: Optional[int] = Field(default=None, ge=0, le=50)
    image_url: Optional[str] = Field(default=None, max_length=500)
    photos: List[HttpUrl] = Field(default_factory=list)

class PropertyUpdateIn(CamelIn):
    title: Optional[str] = Field(default=None, min_length=3, max_length=200)
    description: Optional[str] = Field(default=None, min_length=10)
    city: Optional[str] = Field(default=None, min_length=2, max_length=200)
    price: Optional[int] = Field(default=None, ge=1)
    rooms: Optional[int] = Field(default=None, ge=1)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    area: Optional[int] = Field(default=None, ge=10)
    has_wifi: Optional[bool] = None
    has_parking: Optional[bool] = None
    has_pool: Optional[bool] = None
    rating: Optional[int] = Field(default=None, ge=0, le=50)
    image_url: Optional[str] = Field(default=None, max_length=500)

class PropertyFilter(CamelIn):
    city: Optional[str] = None
    min_price: Optional[int] = Field(default=None, ge=0)
    max_price: Optional[int] = Field(default=None, ge=0)
    min_rooms: Optional[int] = Field(default=None, ge=0)
    min_area: Optional[int] = Field(default=None, ge=0)
    has_wifi: Optional[bool] = None
    has_parking: Optional[bool] = None
    has_pool: Optional[bool] = None
    keyword: Optional[str] = None

class PropertySearchIn(PropertyFilter):
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1, le=settings.MAX_PAGE_SIZE)

class PropertyPageOut(BaseModel):
    items: List[PropertyOut]
    page: int
    page_size: int
    total: int
    pages: int

    class Config:
        from_attributes = True

# ==== Quotes & Bookings ====

class QuoteIn(CamelIn):
    check_in_date: date
    check_out_date: date

class QuoteOut(BaseModel):
    property_id: int
    check_in_date: date
    check_out_date: date
    nights: int
    nightly_price: int
    total: int

class BookingOut(BaseModel):
    id: int
    property_id: int
    user_id: int
    check_in_date: date
    check_out_date: date
    guests: int
    nights: int
    total_price: int
    status: BookingStatus
    created_at: datetime

    class Config:
        use_enum_values = True
        from_attributes = True

class BookingCreateIn(CamelIn):
    property_id: int
    check_in_date: date
    check_out_date: date
    guests: int = Field(default=1, ge=1)

class BookingUpdateIn(CamelIn):
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    guests: Optional[int] = Field(default=None, ge=1)
    status: Optional[BookingStatus] = None

# ==== Reviews ====

class ReviewOut(BaseModel):
    id: int
    property_id: int
    user_id: int
    rating: int
    comment: str
    created_at: datetime

    class Config:
        from_attributes = True

class ReviewIn(CamelIn):
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=settings.REVIEW_MIN_LENGTH, max_length=settings.REVIEW_MAX_LENGTH)

class ReviewUpdateIn(CamelIn):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = Field(default=None, min_length=settings.REVIEW_MIN_LENGTH, max_length=settings.REVIEW_MAX_LENGTH)

class StarsOut(BaseModel):
    full: int
    half: bool
    empty: int

    class Config:
        from_attributes = True

class RatingSummaryOut(BaseModel):
    property_id: int
    average: float
    count: int
    display: str
    stars: StarsOut
    listing_rating: Optional[float] = None

# ==== Waitlist ====

class WaitlistIn(CamelIn):
    email: EmailStr
    name: str = Field(min_length=2, max_length=200)

class WaitlistOut(BaseModel):
    id: int
    email: str
    name: str
    created_at: datetime

    class Config:
        from_attributes = True
