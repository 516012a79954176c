"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass

from events.domain.value_objects import EntityId


@dataclass(frozen=True)
class HotelId(EntityId):
    """Identifier of a Hotel."""


@dataclass(frozen=True)
class RoomId(EntityId):
    """Identifier of a Room."""


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
