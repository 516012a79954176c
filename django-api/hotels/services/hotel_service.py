"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import structlog

from events.domain import UserId
from hotels.domain.errors import HotelNotFoundError, HotelsNotFoundError, InvalidHotelIdError
from hotels.domain.models import Hotel
from hotels.domain.value_objects import HotelId
from hotels.services.eligibility import EligibilityGate
from hotels.stores.interfaces import HotelStore

logger = structlog.get_logger(__name__)


class HotelService:
    """Service for eligibility-gated hotel reads."""

    def __init__(self, store: HotelStore, gate: EligibilityGate) -> None:
        self._store = store
        self._gate = gate

    def list_hotels(self, user_id: UserId) -> list[Hotel]:
        """Return all hotels visible to ``user_id``.

        Raises:
            DomainError: If the user is not eligible, or the catalog is unavailable.
        """
        self._gate.check(user_id).raise_for_error()

        hotels = self._store.list_hotels()
        if hotels is None:
            raise HotelsNotFoundError()
        return hotels

    def get_hotel_rooms(self, user_id: UserId, hotel_id: str) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            InvalidHotelIdError: If hotel_id is not a positive integer.
            DomainError: If the user is not eligible.
            HotelNotFoundError: If the hotel does not exist.
        """
        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError as exc:
            raise InvalidHotelIdError() from exc

        self._gate.check(user_id).raise_for_error()

        hotel = self._store.get_hotel_with_rooms(parsed_id)
        if hotel is None:
            raise HotelNotFoundError(parsed_id.value)
        logger.debug("hotel_rooms_loaded", hotel_id=parsed_id.value, rooms=len(hotel.rooms))
        return hotel
