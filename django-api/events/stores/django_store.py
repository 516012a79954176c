"""Django ORM implementations of the registration stores."""

from events import models
from events.domain import (
    Address,
    Enrollment,
    EnrollmentId,
    Money,
    Payment,
    PaymentId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from events.stores.interfaces import EnrollmentStore, PaymentStore, TicketStore


def _to_address(row: models.Address) -> Address:
    return Address(
        cep=row.cep,
        street=row.street,
        city=row.city,
        state=row.state,
        number=row.number,
        neighborhood=row.neighborhood,
        address_detail=row.address_detail,
    )


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.pk),
        name=row.name,
        price=Money(row.price),
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_ticket(row: models.Ticket, with_type: bool = False) -> Ticket:
    return Ticket(
        id=TicketId(row.pk),
        enrollment_id=EnrollmentId(row.enrollment_id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        status=TicketStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        ticket_type=_to_ticket_type(row.ticket_type) if with_type else None,
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment store backed by the Django ORM."""

    def find_with_address_by_user_id(self, user_id: UserId) -> Enrollment | None:
        row = (
            models.Enrollment.objects.select_related("address")
            .filter(user_id=user_id.value)
            .first()
        )
        if row is None:
            return None
        try:
            address = _to_address(row.address)
        except models.Address.DoesNotExist:
            address = None
        return Enrollment(
            id=EnrollmentId(row.pk),
            user_id=UserId(row.user_id),
            name=row.name,
            cpf=row.cpf,
            birthday=row.birthday,
            phone=row.phone,
            created_at=row.created_at,
            updated_at=row.updated_at,
            address=address,
        )


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = models.Ticket.objects.filter(enrollment_id=enrollment_id.value).first()
        return _to_ticket(row) if row is not None else None

    def find_with_type_by_id(self, ticket_id: TicketId) -> Ticket | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(pk=ticket_id.value)
            .first()
        )
        return _to_ticket(row, with_type=True) if row is not None else None


class DjangoPaymentStore(PaymentStore):
    """Payment store backed by the Django ORM."""

    def find_by_ticket_id(self, ticket_id: TicketId) -> Payment | None:
        row = models.Payment.objects.filter(ticket_id=ticket_id.value).first()
        if row is None:
            return None
        return Payment(
            id=PaymentId(row.pk),
            ticket_id=TicketId(row.ticket_id),
            value=Money(row.value),
            card_issuer=row.card_issuer,
            card_last_digits=row.card_last_digits,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
