"""Integration tests for the hotel endpoints.

Run with: pytest tests/test_hotels_api.py -v
"""

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from events.models import Ticket
from tests import factories


def iso(value) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@pytest.mark.django_db
class TestHotelList:
    """Tests for GET /hotels"""

    def test_no_enrollment_returns_404(self, auth_client: APIClient):
        factories.create_ticket_remote()

        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {}

    def test_no_ticket_returns_404(self, auth_client: APIClient, enrollment):
        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize(
        ("is_remote", "includes_hotel"),
        [(True, False), (True, True), (False, False)],
    )
    def test_non_stay_ticket_returns_409(self, auth_client: APIClient, enrollment, is_remote, includes_hotel):
        ticket_type = factories.create_ticket_type(is_remote=is_remote, includes_hotel=includes_hotel)
        ticket = factories.create_ticket(enrollment, ticket_type, Ticket.Status.PAID)
        factories.create_payment(ticket)
        factories.create_hotel()

        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {}

    def test_unpaid_ticket_returns_409(self, auth_client: APIClient, enrollment):
        factories.create_ticket(enrollment, factories.create_ticket_with_hotel())
        factories.create_hotel()

        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_conflict_as_not_found_setting(self, auth_client: APIClient, enrollment, settings):
        settings.HOTELS_CONFLICT_AS_NOT_FOUND = True
        factories.create_ticket(enrollment, factories.create_ticket_with_hotel())

        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {}

    def test_returns_list_of_hotels(self, auth_client: APIClient, eligible_user):
        hotel = factories.create_hotel()
        factories.create_room(hotel)

        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {
                "id": hotel.id,
                "name": hotel.name,
                "image": hotel.image,
                "createdAt": iso(hotel.created_at),
                "updatedAt": iso(hotel.updated_at),
            }
        ]

    def test_returns_empty_list(self, auth_client: APIClient, eligible_user):
        response = auth_client.get("/hotels")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


@pytest.mark.django_db
class TestHotelRooms:
    """Tests for GET /hotels/{hotel_id}"""

    def test_no_enrollment_returns_404(self, auth_client: APIClient):
        hotel = factories.create_hotel()

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remote_ticket_returns_409(self, auth_client: APIClient, enrollment):
        ticket = factories.create_ticket(enrollment, factories.create_ticket_remote(), Ticket.Status.PAID)
        factories.create_payment(ticket)
        hotel = factories.create_hotel()

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_unpaid_ticket_returns_409(self, auth_client: APIClient, enrollment):
        factories.create_ticket(enrollment, factories.create_ticket_with_hotel())
        hotel = factories.create_hotel()

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_unknown_hotel_returns_404(self, auth_client: APIClient, eligible_user):
        factories.create_hotel()

        response = auth_client.get("/hotels/100000")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {}

    @pytest.mark.parametrize("hotel_id", ["abc", "0", "-1", "%205", "5%20"])
    def test_invalid_hotel_id_returns_400(self, auth_client: APIClient, eligible_user, hotel_id):
        response = auth_client.get(f"/hotels/{hotel_id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {}

    def test_returns_hotel_with_rooms(self, auth_client: APIClient, eligible_user):
        hotel = factories.create_hotel()
        room = factories.create_room(hotel)

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": hotel.id,
            "name": hotel.name,
            "image": hotel.image,
            "createdAt": iso(hotel.created_at),
            "updatedAt": iso(hotel.updated_at),
            "Rooms": [
                {
                    "id": room.id,
                    "name": room.name,
                    "capacity": room.capacity,
                    "hotelId": hotel.id,
                    "createdAt": iso(room.created_at),
                    "updatedAt": iso(room.updated_at),
                }
            ],
        }

    def test_returns_hotel_with_no_rooms(self, auth_client: APIClient, eligible_user):
        hotel = factories.create_hotel()

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == hotel.id
        assert body["Rooms"] == []

    def test_returns_only_rooms_of_requested_hotel(self, auth_client: APIClient, eligible_user):
        hotel = factories.create_hotel()
        rooms = [factories.create_room(hotel) for _ in range(4)]
        factories.create_room(factories.create_hotel())

        response = auth_client.get(f"/hotels/{hotel.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [r["id"] for r in body["Rooms"]] == [r.id for r in rooms]
        assert {r["hotelId"] for r in body["Rooms"]} == {hotel.id}


@pytest.mark.django_db
def test_paid_hotel_ticket_scenario(auth_client: APIClient, eligible_user):
    """A paid in-person ticket with lodging sees the hotel in both endpoints."""
    hotel = factories.create_hotel()

    listing = auth_client.get("/hotels")
    detail = auth_client.get(f"/hotels/{hotel.id}")

    assert listing.status_code == status.HTTP_200_OK
    assert [h["id"] for h in listing.json()] == [hotel.id]
    assert detail.status_code == status.HTTP_200_OK
    assert detail.json()["Rooms"] == []
