"""RSVP service - reservations on free events and guest check-in."""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from bookings.domain import GuestCount, Rsvp, RsvpDraft, RsvpId
from bookings.domain.errors import (
    AlreadyRsvpedError,
    CapacityExceededError,
    InvalidCheckInCountError,
    RsvpNotFoundError,
    RsvpRequiresFreeEventError,
)
from bookings.stores.interfaces import RsvpStore
from common.errors import InvalidIdError, PermissionDeniedError, ValidationFailedError
from common.notifications import notify
from common.value_objects import Actor
from events.domain import Event, EventId
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class RsvpService:
    """Service for RSVP operations."""

    def __init__(
        self,
        rsvp_store: RsvpStore,
        event_store: EventStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._rsvps = rsvp_store
        self._events = event_store
        self._clock = clock

    def create_rsvp(self, actor: Actor | None, event_id: str, name: str, email: str, phone: str, quantity: int) -> Rsvp:
        """Reserve places on a free event.

        The capacity check below is only a fast path. The store repeats it
        atomically with the decrement, so a stale read can never overbook.

        Raises:
            InvalidEventIdError: If event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ValidationFailedError: If quantity is outside 1..10.
            RsvpRequiresFreeEventError: If the event has a price.
            AlreadyRsvpedError: If the email already RSVPed to this event.
            CapacityExceededError: If fewer places remain than requested.
        """
        event = self._get_event(event_id)
        try:
            guests = GuestCount(quantity)
        except ValueError as exc:
            raise ValidationFailedError(str(exc)) from None
        if not event.is_free:
            raise RsvpRequiresFreeEventError()

        draft = RsvpDraft(name=name.strip(), email=email.strip().lower(), phone=phone.strip(), quantity=guests)
        if self._rsvps.rsvp_exists(event.id, draft.email):
            raise AlreadyRsvpedError()
        if not event.tickets_available.can_fit(guests.value):
            raise CapacityExceededError(guests.value, event.tickets_available.value)

        rsvp = self._rsvps.create_rsvp(event.id, actor.id if actor else None, draft)
        logger.info("RSVP %s created for event %s (%d guests)", rsvp.id, event.id, rsvp.quantity)
        self._notify_organizer(event, rsvp)
        return rsvp

    def check_in(self, actor: Actor, rsvp_id: str, checked_in_guests: object) -> Rsvp:
        """Record how many of an RSVP's guests have arrived.

        `checked_in_guests` is the raw request value; integers and digit
        strings are accepted.

        Raises:
            InvalidIdError: If rsvp_id is not a valid UUID.
            RsvpNotFoundError: If the RSVP does not exist.
            PermissionDeniedError: If the actor does not organize the event.
            InvalidCheckInCountError: If the count is outside 0..quantity.
        """
        rsvp = self._get_rsvp(rsvp_id)
        self._check_organizer(actor, rsvp.event_id)
        count = _as_count(checked_in_guests)
        if count is None or not 0 <= count <= rsvp.quantity:
            raise InvalidCheckInCountError(rsvp.quantity)
        if not self._rsvps.set_checked_in_guests(rsvp.id, count, self._clock()):
            raise InvalidCheckInCountError(rsvp.quantity)
        logger.info("RSVP %s checked in %d/%d", rsvp.id, count, rsvp.quantity)
        return self._get_rsvp(rsvp_id)

    def list_for_actor(self, actor: Actor) -> list[Rsvp]:
        """Every RSVP for admins, RSVPs on their own events for organizers."""
        return self._rsvps.list_for_organizer(None if actor.is_admin else actor.id)

    def list_for_event(self, actor: Actor, event_id: str) -> list[Rsvp]:
        event = self._get_event(event_id)
        self._check_organizer(actor, event.id, event)
        return self._rsvps.list_for_event(event.id)

    def list_for_user(self, actor: Actor) -> list[Rsvp]:
        return self._rsvps.list_for_user(actor.id)

    def _get_event(self, event_id: str) -> Event:
        event = self._events.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _get_rsvp(self, rsvp_id: str) -> Rsvp:
        try:
            parsed = RsvpId.from_string(rsvp_id)
        except ValueError:
            raise InvalidIdError(RsvpId.entity) from None
        rsvp = self._rsvps.get_rsvp(parsed)
        if rsvp is None:
            raise RsvpNotFoundError(rsvp_id)
        return rsvp

    def _check_organizer(self, actor: Actor, event_id: EventId, event: Event | None = None) -> None:
        if actor.is_admin:
            return
        event = event or self._events.get_event(event_id)
        if event is None or not event.is_owned_by(actor.id):
            raise PermissionDeniedError("Not authorized to manage RSVPs for this event")

    def _notify_organizer(self, event: Event, rsvp: Rsvp) -> None:
        notify(
            event.organizer_email,
            f"New RSVP for {event.title}",
            f"{rsvp.name} ({rsvp.email}) RSVPed for {rsvp.quantity} guest(s).\n"
            f"Total RSVPs: {event.rsvp_count + 1}",
        )


def _as_count(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None
