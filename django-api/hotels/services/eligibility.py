"""Eligibility gate for hotel data.

A user may see hotels when they are enrolled, hold a ticket for an in-person
tier that includes lodging, and that ticket has been paid. The checks run in
that order and stop at the first failure.
"""

from dataclasses import dataclass

import structlog

from events.domain import UserId
from events.stores import EnrollmentStore, PaymentStore, TicketStore
from hotels.domain.errors import (
    DomainError,
    EnrollmentNotFoundError,
    NonStayTicketError,
    PaymentNotConcludedError,
    TicketNotFoundError,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of an eligibility check: success, or the error that denied it."""

    error: DomainError | None = None

    @property
    def is_eligible(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the denying error, if any."""
        if self.error is not None:
            raise self.error


ELIGIBLE = EligibilityResult()


class EligibilityGate:
    """Checks whether a user is entitled to view hotel data."""

    def __init__(
        self,
        enrollments: EnrollmentStore,
        tickets: TicketStore,
        payments: PaymentStore,
    ) -> None:
        self._enrollments = enrollments
        self._tickets = tickets
        self._payments = payments

    def check(self, user_id: UserId) -> EligibilityResult:
        result = self._evaluate(user_id)
        if not result.is_eligible:
            logger.info(
                "hotel_access_denied",
                user_id=user_id.value,
                code=result.error.code.value,
            )
        return result

    def _evaluate(self, user_id: UserId) -> EligibilityResult:
        enrollment = self._enrollments.find_with_address_by_user_id(user_id)
        if enrollment is None:
            return EligibilityResult(EnrollmentNotFoundError())

        ticket = self._tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            return EligibilityResult(TicketNotFoundError())

        ticket = self._tickets.find_with_type_by_id(ticket.id)
        if ticket is None:
            return EligibilityResult(TicketNotFoundError())
        if not ticket.ticket_type.grants_lodging:
            return EligibilityResult(NonStayTicketError())

        if self._payments.find_by_ticket_id(ticket.id) is None:
            return EligibilityResult(PaymentNotConcludedError())

        return ELIGIBLE
