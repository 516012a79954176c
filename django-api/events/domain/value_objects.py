"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class EntityId:
    """Positive integer primary key."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a route value such as ``"42"``; only ASCII digits are accepted."""
        if not (value.isascii() and value.isdecimal()):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        return cls(value=int(value))


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier of an authenticated user."""


@dataclass(frozen=True)
class EnrollmentId(EntityId):
    """Identifier of an Enrollment."""


@dataclass(frozen=True)
class TicketId(EntityId):
    """Identifier of a Ticket."""


@dataclass(frozen=True)
class TicketTypeId(EntityId):
    """Identifier of a TicketType."""


@dataclass(frozen=True)
class PaymentId(EntityId):
    """Identifier of a Payment."""


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
