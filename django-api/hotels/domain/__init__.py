from hotels.domain.errors import DomainError, ErrorCode, ErrorKind
from hotels.domain.models import Hotel, Room
from hotels.domain.value_objects import Capacity, HotelId, RoomId

__all__ = [
    "Hotel",
    "Room",
    "HotelId",
    "RoomId",
    "Capacity",
    "DomainError",
    "ErrorCode",
    "ErrorKind",
]
