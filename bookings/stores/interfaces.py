"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Operations that touch
shared counters are atomic within the store: callers never read a counter
and write it back.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from bookings.domain import Rsvp, RsvpDraft, RsvpId, Ticket, TicketId
from common.value_objects import UserId
from events.domain import EventId


class RsvpStore(ABC):
    """Interface for RSVP persistence operations."""

    @abstractmethod
    def create_rsvp(self, event_id: EventId, user_id: UserId | None, draft: RsvpDraft) -> Rsvp:
        """Reserve `draft.quantity` places on the event and record the RSVP.

        Both happen in one transaction; nothing changes if either fails.

        Raises:
            CapacityExceededError: If fewer places remain than requested.
            AlreadyRsvpedError: If the email already has an RSVP for the event.
        """
        ...

    @abstractmethod
    def rsvp_exists(self, event_id: EventId, email: str) -> bool:
        ...

    @abstractmethod
    def get_rsvp(self, rsvp_id: RsvpId) -> Rsvp | None:
        ...

    @abstractmethod
    def set_checked_in_guests(self, rsvp_id: RsvpId, count: int, at: datetime) -> bool:
        """Store the checked-in count if it does not exceed the RSVP quantity."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Rsvp]:
        ...

    @abstractmethod
    def list_for_organizer(self, organizer_id: UserId | None) -> list[Rsvp]:
        """RSVPs on events owned by the organizer; every RSVP when None."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[Rsvp]:
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def issue_ticket(self, event_id: EventId, user_id: UserId) -> Ticket:
        """Reserve one place on the event and create an active ticket.

        Raises:
            CapacityExceededError: If the event is sold out.
        """
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        ...

    @abstractmethod
    def get_ticket_by_code(self, code: str) -> Ticket | None:
        ...

    @abstractmethod
    def mark_used(self, ticket_id: TicketId, at: datetime) -> bool:
        """Move an active ticket to used. False if it was not active."""
        ...

    @abstractmethod
    def cancel_ticket(self, ticket_id: TicketId) -> bool:
        """Cancel an active ticket and return its place to the event."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[Ticket]:
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Ticket]:
        ...

    @abstractmethod
    def status_counts(self, organizer_id: UserId | None) -> list[tuple[str, str, str, int]]:
        """Return (event_id, event_title, status, count) rows.

        Limited to the organizer's events unless organizer_id is None.
        """
        ...

