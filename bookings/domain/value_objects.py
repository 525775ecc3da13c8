"""Domain primitives that enforce validity at creation time."""

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar, Self

from common.value_objects import EntityId

MAX_GUESTS = 10

# No I, O, 0 or 1 so codes survive being read aloud or retyped
TICKET_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
TICKET_CODE_PATTERN = re.compile(rf"[{TICKET_CODE_ALPHABET}]{{4}}(-[{TICKET_CODE_ALPHABET}]{{4}}){{2}}")


@dataclass(frozen=True)
class RsvpId(EntityId):
    """Unique identifier for an RSVP."""

    entity: ClassVar[str] = "RSVP"


@dataclass(frozen=True)
class TicketId(EntityId):
    """Unique identifier for a Ticket."""

    entity: ClassVar[str] = "ticket"


@dataclass(frozen=True)
class GuestCount:
    """Number of guests on one RSVP, between 1 and MAX_GUESTS."""

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= MAX_GUESTS:
            raise ValueError(f"Quantity must be between 1 and {MAX_GUESTS}")


@dataclass(frozen=True)
class TicketCode:
    """Human-enterable ticket code in XXXX-XXXX-XXXX form."""

    value: str

    def __post_init__(self) -> None:
        if not TICKET_CODE_PATTERN.fullmatch(self.value):
            raise ValueError("Invalid ticket code format")

    @classmethod
    def generate(cls) -> Self:
        groups = ("".join(secrets.choice(TICKET_CODE_ALPHABET) for _ in range(4)) for _ in range(3))
        return cls(value="-".join(groups))

    @classmethod
    def normalize(cls, raw: str) -> str:
        return raw.strip().upper()

    def __str__(self) -> str:
        return self.value
