"""Ticket service - issuing, check-in at the door, cancellation."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from django.utils import timezone

from bookings.domain import Ticket, TicketAnalytics, TicketId
from bookings.domain.errors import (
    CapacityExceededError,
    EventEndedError,
    EventNotStartedError,
    TicketAlreadyUsedError,
    TicketCancelledError,
    TicketNotCancellableError,
    TicketNotFoundError,
    TicketRequiresPaidEventError,
)
from bookings.domain.value_objects import TicketCode
from bookings.stores.interfaces import TicketStore
from common.errors import InvalidIdError, PermissionDeniedError, ValidationFailedError
from common.value_objects import Actor
from events.domain import Event
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_WINDOW = timedelta(hours=2)


class TicketService:
    """Service for ticket operations.

    `entry_window` is how long before an event starts its tickets may be
    checked in.
    """

    def __init__(
        self,
        ticket_store: TicketStore,
        event_store: EventStore,
        clock: Callable[[], datetime] = timezone.now,
        entry_window: timedelta = DEFAULT_ENTRY_WINDOW,
    ) -> None:
        self._tickets = ticket_store
        self._events = event_store
        self._clock = clock
        self._entry_window = entry_window

    def issue_ticket(self, actor: Actor, event_id: str) -> Ticket:
        """Issue one ticket to the actor for a paid event.

        Raises:
            InvalidEventIdError: If event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            TicketRequiresPaidEventError: If the event is free.
            CapacityExceededError: If the event is sold out.
        """
        event = self._get_event(event_id)
        if event.is_free:
            raise TicketRequiresPaidEventError()
        if not event.tickets_available.can_fit(1):
            raise CapacityExceededError(1, event.tickets_available.value)
        ticket = self._tickets.issue_ticket(event.id, actor.id)
        logger.info("Ticket %s issued for event %s to %s", ticket.id, event.id, actor.id)
        return ticket

    def check_in_by_code(self, actor: Actor, code: str, event_id: str | None = None) -> Ticket:
        """Check in the ticket with `code`, optionally restricted to one event.

        A code that exists on a different event is reported as not found.
        """
        normalized = TicketCode.normalize(code or "")
        if not normalized:
            raise ValidationFailedError("Ticket code is required")
        ticket = self._tickets.get_ticket_by_code(normalized)
        if ticket is None:
            raise TicketNotFoundError()
        if event_id and ticket.event_id != parse_event_id(event_id):
            raise TicketNotFoundError()
        return self._check_in(actor, ticket)

    def check_in(self, actor: Actor, ticket_id: str) -> Ticket:
        return self._check_in(actor, self._get_ticket(ticket_id))

    def cancel_ticket(self, actor: Actor, ticket_id: str) -> Ticket:
        """Cancel the actor's active ticket and return its place to the event.

        Raises:
            PermissionDeniedError: If the ticket belongs to someone else.
            TicketNotCancellableError: If the ticket is not active.
        """
        ticket = self._get_ticket(ticket_id)
        if not (actor.is_admin or ticket.user_id == actor.id):
            raise PermissionDeniedError("Not authorized to cancel this ticket")
        if not ticket.is_active or not self._tickets.cancel_ticket(ticket.id):
            raise TicketNotCancellableError()
        logger.info("Ticket %s cancelled by %s", ticket.id, actor.id)
        return self._get_ticket(ticket_id)

    def get_by_code(self, actor: Actor, code: str) -> Ticket:
        """Look up a ticket by code for its holder, the organizer or an admin."""
        ticket = self._tickets.get_ticket_by_code(TicketCode.normalize(code))
        if ticket is None:
            raise TicketNotFoundError()
        if not (actor.is_admin or ticket.user_id == actor.id):
            self._check_organizer(actor, self._get_event(str(ticket.event_id)))
        return ticket

    def list_for_user(self, actor: Actor) -> list[Ticket]:
        return self._tickets.list_for_user(actor.id)

    def list_for_event(self, actor: Actor, event_id: str) -> list[Ticket]:
        event = self._get_event(event_id)
        self._check_organizer(actor, event)
        return self._tickets.list_for_event(event.id)

    def analytics(self, actor: Actor) -> TicketAnalytics:
        """Ticket counts by status, overall and per event."""
        result = TicketAnalytics()
        for event_id, title, status, count in self._tickets.status_counts(None if actor.is_admin else actor.id):
            result.add(event_id, title, status, count)
        return result

    def _check_in(self, actor: Actor, ticket: Ticket) -> Ticket:
        event = self._get_event(str(ticket.event_id))
        self._check_organizer(actor, event)
        self._check_status(ticket)
        self._check_window(event)

        if not self._tickets.mark_used(ticket.id, self._clock()):
            # Lost a race with another check-in or a cancellation
            current = self._tickets.get_ticket(ticket.id)
            if current is None:
                raise TicketNotFoundError()
            self._check_status(current)
            raise TicketAlreadyUsedError(current.summary())

        logger.info("Ticket %s checked in by %s", ticket.id, actor.id)
        return self._tickets.get_ticket(ticket.id)

    def _check_status(self, ticket: Ticket) -> None:
        if ticket.is_used:
            raise TicketAlreadyUsedError(ticket.summary())
        if ticket.status == "cancelled":
            raise TicketCancelledError(ticket.summary())

    def _check_window(self, event: Event) -> None:
        now = self._clock()
        if now > event.end_date_time:
            raise EventEndedError()
        if now < event.start_date_time - self._entry_window:
            raise EventNotStartedError(self._entry_window.total_seconds() / 3600)

    def _check_organizer(self, actor: Actor, event: Event) -> None:
        if not (actor.is_admin or event.is_owned_by(actor.id)):
            raise PermissionDeniedError("Not authorized to manage tickets for this event")

    def _get_event(self, event_id: str) -> Event:
        event = self._events.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _get_ticket(self, ticket_id: str) -> Ticket:
        try:
            parsed = TicketId.from_string(ticket_id)
        except ValueError:
            raise InvalidIdError(TicketId.entity) from None
        ticket = self._tickets.get_ticket(parsed)
        if ticket is None:
            raise TicketNotFoundError()
        return ticket
