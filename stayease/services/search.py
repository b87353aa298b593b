"""Listing search: criteria matching and page slicing.

Both functions are pure and work on anything exposing the listing attributes
(ORM rows in the API, simple objects in tests).
"""
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ..config import settings

AMENITY_FLAGS = ("has_wifi", "has_parking", "has_pool")


def _text(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def matches(prop: Any, criteria: Any) -> bool:
    """True when ``prop`` satisfies every criterion that is actually set."""
    city = _text(criteria.city)
    if city and city not in _text(prop.city):
        return False

    if criteria.min_price is not None and prop.price < criteria.min_price:
        return False
    if criteria.max_price is not None and prop.price > criteria.max_price:
        return False

    if criteria.min_rooms is not None and (prop.rooms or 0) < criteria.min_rooms:
        return False
    if criteria.min_area is not None and (prop.area or 0) < criteria.min_area:
        return False

    for flag in AMENITY_FLAGS:
        if getattr(criteria, flag) and not getattr(prop, flag):
            return False

    keyword = _text(criteria.keyword)
    if keyword and keyword not in _text(prop.title) and keyword not in _text(prop.description):
        return False

    return True


def filter_properties(properties: Iterable[Any], criteria: Any) -> list:
    """Keep the listings matching ``criteria``, preserving input order."""
    return [p for p in properties if matches(p, criteria)]


@dataclass
class Page:
    items: list = field(default_factory=list)
    page: int = 1
    page_size: int = settings.PAGE_SIZE
    total: int = 0

    @property
    def pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))


def paginate(items: Sequence[Any], page: int = 1, page_size: Optional[int] = None) -> Page:
    page_size = page_size or settings.PAGE_SIZE
    page = max(page, 1)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
    )
