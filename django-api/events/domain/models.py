"""Domain models for attendee registration records.

These are pure domain objects, read-only from the point of view of the API.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from events.domain.value_objects import (
    EnrollmentId,
    Money,
    PaymentId,
    TicketId,
    TicketTypeId,
    UserId,
)


class TicketStatus(Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    """Postal address attached to an Enrollment."""

    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: str | None = None


@dataclass(frozen=True)
class Enrollment:
    """A user's registration for the event."""

    id: EnrollmentId
    user_id: UserId
    name: str
    cpf: str
    birthday: date
    phone: str
    created_at: datetime
    updated_at: datetime
    address: Address | None = None


@dataclass(frozen=True)
class TicketType:
    """Ticket tier: attendance mode and lodging inclusion."""

    id: TicketTypeId
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool
    created_at: datetime
    updated_at: datetime

    @property
    def grants_lodging(self) -> bool:
        """True for in-person tiers that bundle a hotel stay."""
        return not self.is_remote and self.includes_hotel


@dataclass(frozen=True)
class Ticket:
    """Admission record of an Enrollment.

    ``ticket_type`` is only populated by reads that ask for it.
    """

    id: TicketId
    enrollment_id: EnrollmentId
    ticket_type_id: TicketTypeId
    status: TicketStatus
    created_at: datetime
    updated_at: datetime
    ticket_type: TicketType | None = None


@dataclass(frozen=True)
class Payment:
    """Settlement of a Ticket."""

    id: PaymentId
    ticket_id: TicketId
    value: Money
    card_issuer: str
    card_last_digits: str
    created_at: datetime
    updated_at: datetime
