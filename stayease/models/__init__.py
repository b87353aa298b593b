from .user import User
from .property import Property
from .photo import Photo
from .booking import Booking, BookingStatus
from .review import Review
from .waitlist import WaitlistEntry
