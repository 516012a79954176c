"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import UserId
from events.stores import DjangoEnrollmentStore, DjangoPaymentStore, DjangoTicketStore
from hotels.domain.errors import DomainError, ErrorKind
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import EligibilityGate, HotelService
from hotels.stores import DjangoHotelStore

logger = structlog.get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def get_hotel_service() -> HotelService:
    gate = EligibilityGate(
        enrollments=DjangoEnrollmentStore(),
        tickets=DjangoTicketStore(),
        payments=DjangoPaymentStore(),
    )
    return HotelService(store=DjangoHotelStore(), gate=gate)


def error_response(error: DomainError) -> Response:
    """Map a domain error to an empty-bodied response."""
    if error.kind is ErrorKind.CONFLICT and settings.HOTELS_CONFLICT_AS_NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = STATUS_BY_KIND[error.kind]
    logger.warning("hotel_request_failed", code=error.code.value, status=status_code)
    return Response({}, status=status_code)


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = get_hotel_service().list_hotels(UserId(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelRoomsView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = get_hotel_service().get_hotel_rooms(UserId(request.user.pk), hotel_id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelWithRoomsSerializer(hotel).data)
