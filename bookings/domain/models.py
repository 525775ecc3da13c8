"""Domain models representing persisted booking state."""

from dataclasses import dataclass, field
from datetime import datetime

from bookings.domain.value_objects import GuestCount, RsvpId, TicketCode, TicketId
from common.value_objects import UserId
from events.domain import EventId


@dataclass(frozen=True)
class RsvpDraft:
    """Validated input for a new RSVP."""

    name: str
    email: str
    phone: str
    quantity: GuestCount


@dataclass(frozen=True)
class Rsvp:
    """Domain representation of an RSVP."""

    id: RsvpId
    event_id: EventId
    event_title: str
    user_id: UserId | None
    name: str
    email: str
    phone: str
    quantity: int
    checked_in_guests: int
    last_checked_in_at: datetime | None
    created_at: datetime

    @property
    def check_in_status(self) -> str:
        if self.checked_in_guests == 0:
            return "none"
        if self.checked_in_guests >= self.quantity:
            return "full"
        return "partial"


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    event_id: EventId
    event_title: str
    event_start: datetime
    event_venue: str
    user_id: UserId
    attendee_name: str
    attendee_email: str
    ticket_code: TicketCode
    status: str
    checked_in_at: datetime | None
    created_at: datetime

    @property
    def is_used(self) -> bool:
        return self.status == "used"

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def summary(self) -> dict:
        return {
            "ticketId": str(self.id),
            "ticketCode": str(self.ticket_code),
            "status": self.status,
            "checkedInAt": self.checked_in_at.isoformat() if self.checked_in_at else None,
            "attendee": {"name": self.attendee_name, "email": self.attendee_email},
        }


STATUSES = ("active", "used", "cancelled")


def _empty_counts() -> dict[str, int]:
    return {status: 0 for status in STATUSES}


@dataclass
class EventTicketStats:
    title: str
    counts: dict[str, int] = field(default_factory=_empty_counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass
class TicketAnalytics:
    """Ticket counts by status, overall and per event."""

    by_status: dict[str, int] = field(default_factory=_empty_counts)
    by_event: dict[str, EventTicketStats] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.by_status.values())

    def add(self, event_id: str, title: str, status: str, count: int) -> None:
        self.by_status[status] = self.by_status.get(status, 0) + count
        stats = self.by_event.setdefault(event_id, EventTicketStats(title=title))
        stats.counts[status] = stats.counts.get(status, 0) + count
