"""Domain errors raised below the HTTP layer.

Routes translate these into responses through the handlers registered in
``stayease.main``.
"""


class StayEaseError(Exception):
    """Base class for errors the API reports to the caller."""


class DateError(StayEaseError, ValueError):
    """A stay's date range was rejected by the booking calculator."""

    CHECKIN_IN_PAST = "checkin-in-past"
    CHECKOUT_BEFORE_CHECKIN = "checkout-before-checkin"

    MESSAGES = {
        CHECKIN_IN_PAST: "Check-in date cannot be in the past",
        CHECKOUT_BEFORE_CHECKIN: "Check-out date must be after check-in date",
    }

    def __init__(self, code: str):
        self.code = code
        super().__init__(self.MESSAGES.get(code, code))


class DuplicateEntryError(StayEaseError):
    """A unique constraint (login, email, one review per stay...) was violated."""

    def __init__(self, message: str = "Entry already exists"):
        self.message = message
        super().__init__(message)
