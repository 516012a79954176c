"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Category of a domain error; handlers map each kind to a status code."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    NON_STAY_TICKET = "NON_STAY_TICKET"
    PAYMENT_NOT_CONCLUDED = "PAYMENT_NOT_CONCLUDED"
    HOTELS_NOT_FOUND = "HOTELS_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self]


_KINDS = {
    ErrorCode.ENROLLMENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.NON_STAY_TICKET: ErrorKind.CONFLICT,
    ErrorCode.PAYMENT_NOT_CONCLUDED: ErrorKind.CONFLICT,
    ErrorCode.HOTELS_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.INVALID_HOTEL_ID: ErrorKind.BAD_REQUEST,
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has not enrolled in the event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )


class TicketNotFoundError(DomainError):
    """Raised when the enrollment holds no ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )


class NonStayTicketError(DomainError):
    """Raised when the ticket is remote or does not include lodging."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NON_STAY_TICKET,
            message="non-stay event",
        )


class PaymentNotConcludedError(DomainError):
    """Raised when the ticket has no recorded payment."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_NOT_CONCLUDED,
            message="payment not concluded",
        )


class HotelsNotFoundError(DomainError):
    """Raised when the hotel catalog could not be read."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTELS_NOT_FOUND,
            message="Hotels not found",
        )


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        self.hotel_id = hotel_id


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            message="Invalid hotel ID format",
        )
