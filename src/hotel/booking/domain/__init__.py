from .entity import Booking
from .message import MessageCatalog
from .repository import BookingRepository
from .value_object import BookingId

__all__ = [
    "Booking",
    "BookingId",
    "BookingRepository",
    "MessageCatalog",
]
