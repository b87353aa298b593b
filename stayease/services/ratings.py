import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

MAX_STARS = 5
HALF_STAR_THRESHOLD = 0.5


@dataclass(frozen=True)
class StarDisplay:
    full: int
    half: bool
    empty: int


@dataclass(frozen=True)
class RatingSummary:
    average: float
    count: int
    display: str
    stars: StarDisplay


def average_rating(ratings: Iterable[int]) -> float:
    """Mean of the given ratings, 0.0 when there are none."""
    values = list(ratings)
    if not values:
        return 0.0
    return sum(values) / len(values)


def format_rating(value: float) -> str:
    """One decimal place, ties rounded up (4.25 -> "4.3")."""
    return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def star_display(value: float) -> StarDisplay:
    """Split a rating into full, half and empty stars out of five."""
    value = min(max(value, 0.0), float(MAX_STARS))
    full = math.floor(value)
    half = (value - full) >= HALF_STAR_THRESHOLD
    return StarDisplay(full=full, half=half, empty=MAX_STARS - full - (1 if half else 0))


def summarize(ratings: Iterable[int]) -> RatingSummary:
    values = list(ratings)
    average = average_rating(values)
    return RatingSummary(
        average=round(average, 2),
        count=len(values),
        display=format_rating(average),
        stars=star_display(average),
    )


def listing_rating(stored: Optional[int]) -> Optional[float]:
    # listings store ratings x10 (49 -> 4.9)
    if stored is None:
        return None
    return stored / 10
