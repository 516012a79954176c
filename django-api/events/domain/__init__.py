from events.domain.models import Address, Enrollment, Payment, Ticket, TicketStatus, TicketType
from events.domain.value_objects import (
    EnrollmentId,
    EntityId,
    Money,
    PaymentId,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Address",
    "Enrollment",
    "Payment",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "EntityId",
    "UserId",
    "EnrollmentId",
    "TicketId",
    "TicketTypeId",
    "PaymentId",
    "Money",
]
