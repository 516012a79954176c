"""Unit tests for the eligibility gate.

Run with: pytest tests/test_eligibility.py -v
"""

import pytest

from events.domain import TicketStatus, UserId
from hotels.domain import ErrorCode
from hotels.services import EligibilityGate
from tests.fakes import Registry


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def gate(registry: Registry) -> EligibilityGate:
    return EligibilityGate(
        enrollments=registry.enrollments,
        tickets=registry.tickets,
        payments=registry.payments,
    )


class TestEligibilityGate:
    def test_eligible_user_passes(self, registry, gate):
        registry.eligible(1)

        result = gate.check(UserId(1))

        assert result.is_eligible
        assert result.error is None
        result.raise_for_error()

    def test_missing_enrollment_is_not_found(self, gate):
        result = gate.check(UserId(1))

        assert result.error.code is ErrorCode.ENROLLMENT_NOT_FOUND

    def test_missing_ticket_is_not_found(self, registry, gate):
        registry.enroll(1)

        result = gate.check(UserId(1))

        assert result.error.code is ErrorCode.TICKET_NOT_FOUND

    @pytest.mark.parametrize(
        ("is_remote", "includes_hotel"),
        [(True, True), (True, False), (False, False)],
    )
    def test_non_stay_ticket_is_conflict_even_when_paid(self, registry, gate, is_remote, includes_hotel):
        ticket = registry.issue_ticket(
            registry.enroll(1),
            is_remote=is_remote,
            includes_hotel=includes_hotel,
            status=TicketStatus.PAID,
        )
        registry.pay(ticket)

        result = gate.check(UserId(1))

        assert result.error.code is ErrorCode.NON_STAY_TICKET
        assert result.error.message == "non-stay event"

    def test_unpaid_ticket_is_conflict(self, registry, gate):
        registry.issue_ticket(registry.enroll(1))

        result = gate.check(UserId(1))

        assert result.error.code is ErrorCode.PAYMENT_NOT_CONCLUDED
        assert result.error.message == "payment not concluded"

    def test_ticket_type_checked_before_payment(self, registry, gate):
        registry.issue_ticket(registry.enroll(1), is_remote=True)

        result = gate.check(UserId(1))

        assert result.error.code is ErrorCode.NON_STAY_TICKET
        assert registry.payments.calls == 0

    def test_raise_for_error_raises_the_denying_error(self, gate):
        result = gate.check(UserId(1))

        with pytest.raises(type(result.error)) as exc_info:
            result.raise_for_error()
        assert exc_info.value is result.error

    def test_other_users_records_do_not_count(self, registry, gate):
        registry.eligible(1)

        assert gate.check(UserId(2)).error.code is ErrorCode.ENROLLMENT_NOT_FOUND
