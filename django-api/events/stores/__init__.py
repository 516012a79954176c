from events.stores.django_store import DjangoEnrollmentStore, DjangoPaymentStore, DjangoTicketStore
from events.stores.interfaces import EnrollmentStore, PaymentStore, TicketStore

__all__ = [
    "EnrollmentStore",
    "TicketStore",
    "PaymentStore",
    "DjangoEnrollmentStore",
    "DjangoTicketStore",
    "DjangoPaymentStore",
]
