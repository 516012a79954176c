from hotels.handlers.views import HotelListView, HotelRoomsView

__all__ = ["HotelListView", "HotelRoomsView"]
