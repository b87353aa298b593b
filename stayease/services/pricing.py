import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Optional, Union

from ..errors import DateError

DateLike = Union[date, datetime]

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class StayQuote:
    check_in: DateLike
    check_out: DateLike
    nights: int
    nightly_price: int
    total: int


def _as_datetime(value: DateLike) -> datetime:
    """Normalise dates and datetimes so they compare; aware values move to naive UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def validate_stay(check_in: DateLike, check_out: DateLike, today: Optional[date] = None) -> None:
    """
    Reject a stay whose check-in is before today (calendar day only) or whose
    check-out is not strictly after check-in. The past check wins when both apply.
    """
    today = today or date.today()
    start = _as_datetime(check_in)
    if start.date() < today:
        raise DateError(DateError.CHECKIN_IN_PAST)
    if _as_datetime(check_out) <= start:
        raise DateError(DateError.CHECKOUT_BEFORE_CHECKIN)


def count_nights(check_in: DateLike, check_out: DateLike) -> int:
    """Nights between two dates; a partial day counts as a full night."""
    delta = _as_datetime(check_out) - _as_datetime(check_in)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def quote_stay(check_in: DateLike, check_out: DateLike, nightly_price: int, today: Optional[date] = None) -> StayQuote:
    validate_stay(check_in, check_out, today=today)
    nights = count_nights(check_in, check_out)
    return StayQuote(
        check_in=check_in,
        check_out=check_out,
        nights=nights,
        nightly_price=nightly_price,
        total=nights * nightly_price,
    )


def estimate_total(
    check_in: Optional[DateLike],
    check_out: Optional[DateLike],
    nightly_price: int,
    today: Optional[date] = None,
) -> int:
    """Preview total for a half-filled form: 0 until both dates are present and valid."""
    if check_in is None or check_out is None:
        return 0
    try:
        return quote_stay(check_in, check_out, nightly_price, today=today).total
    except DateError:
        return 0
