"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Enrollment, EnrollmentId, Payment, Ticket, TicketId, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_with_address_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment with its address loaded, or None."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the first ticket of an enrollment, or None."""
        ...

    @abstractmethod
    def find_with_type_by_id(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket with ``ticket_type`` populated, or None."""
        ...


class PaymentStore(ABC):
    """Interface for payment lookups."""

    @abstractmethod
    def find_by_ticket_id(self, ticket_id: TicketId) -> Payment | None:
        """Return the first payment recorded for a ticket, or None."""
        ...
