"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import ClassVar

from common.value_objects import EntityId


@dataclass(frozen=True)
class EventId(EntityId):
    """Unique identifier for an Event."""

    entity: ClassVar[str] = "event"


@dataclass(frozen=True)
class Money:
    """Price in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount // 100}.{self.amount % 100:02d}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def can_fit(self, quantity: int) -> bool:
        return quantity <= self.value
