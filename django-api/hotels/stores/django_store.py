"""Django ORM implementation of the HotelStore."""

from django.db.models import Prefetch

from hotels import models
from hotels.domain import Capacity, Hotel, HotelId, Room, RoomId
from hotels.stores.interfaces import HotelStore


def _to_room(row: models.Room) -> Room:
    return Room(
        id=RoomId(row.pk),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.pk),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


class DjangoHotelStore(HotelStore):
    """Hotel store backed by the Django ORM."""

    def list_hotels(self) -> list[Hotel] | None:
        return [_to_hotel(row) for row in models.Hotel.objects.order_by("id")]

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        row = (
            models.Hotel.objects.prefetch_related(
                Prefetch("rooms", queryset=models.Room.objects.order_by("id"))
            )
            .filter(pk=hotel_id.value)
            .first()
        )
        if row is None:
            return None
        return _to_hotel(row, rooms=tuple(_to_room(room) for room in row.rooms.all()))
