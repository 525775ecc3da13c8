"""Django ORM implementations of the RSVP and ticket stores."""

import logging
from datetime import datetime

from django.db import IntegrityError, transaction
from django.db.models import Count

from bookings import models
from bookings.domain import Rsvp, RsvpDraft, RsvpId, Ticket, TicketCode, TicketId
from bookings.domain.errors import AlreadyRsvpedError, CapacityExceededError
from bookings.stores import capacity
from bookings.stores.interfaces import RsvpStore, TicketStore
from common.value_objects import UserId
from events.cache import invalidate_event
from events.domain import EventId

logger = logging.getLogger(__name__)

CODE_ATTEMPTS = 5


def rsvp_to_domain(rsvp: models.Rsvp) -> Rsvp:
    return Rsvp(
        id=RsvpId(value=rsvp.id),
        event_id=EventId(value=rsvp.event_id),
        event_title=rsvp.event.title,
        user_id=UserId(value=rsvp.user_id) if rsvp.user_id else None,
        name=rsvp.name,
        email=rsvp.email,
        phone=rsvp.phone,
        quantity=rsvp.quantity,
        checked_in_guests=rsvp.checked_in_guests,
        last_checked_in_at=rsvp.last_checked_in_at,
        created_at=rsvp.created_at,
    )


def ticket_to_domain(ticket: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(value=ticket.id),
        event_id=EventId(value=ticket.event_id),
        event_title=ticket.event.title,
        event_start=ticket.event.start_date_time,
        event_venue=ticket.event.venue,
        user_id=UserId(value=ticket.user_id),
        attendee_name=ticket.user.name,
        attendee_email=ticket.user.email,
        ticket_code=TicketCode(value=ticket.ticket_code),
        status=ticket.status,
        checked_in_at=ticket.checked_in_at,
        created_at=ticket.created_at,
    )


class DjangoRsvpStore(RsvpStore):
    """RSVP store backed by the Django ORM."""

    def _queryset(self):
        return models.Rsvp.objects.select_related("event")

    def create_rsvp(self, event_id: EventId, user_id: UserId | None, draft: RsvpDraft) -> Rsvp:
        quantity = draft.quantity.value
        try:
            with transaction.atomic():
                if not capacity.reserve(event_id.value, quantity, count_rsvp=True):
                    raise CapacityExceededError(quantity, capacity.available(event_id.value))
                rsvp = models.Rsvp.objects.create(
                    event_id=event_id.value,
                    user_id=user_id.value if user_id else None,
                    name=draft.name,
                    email=draft.email,
                    phone=draft.phone,
                    quantity=quantity,
                )
        except IntegrityError:
            raise AlreadyRsvpedError() from None
        invalidate_event(event_id.value)
        return self.get_rsvp(RsvpId(value=rsvp.id))

    def rsvp_exists(self, event_id: EventId, email: str) -> bool:
        return models.Rsvp.objects.filter(event_id=event_id.value, email=email).exists()

    def get_rsvp(self, rsvp_id: RsvpId) -> Rsvp | None:
        rsvp = self._queryset().filter(pk=rsvp_id.value).first()
        return rsvp_to_domain(rsvp) if rsvp else None

    def set_checked_in_guests(self, rsvp_id: RsvpId, count: int, at: datetime) -> bool:
        updated = models.Rsvp.objects.filter(pk=rsvp_id.value, quantity__gte=count).update(
            checked_in_guests=count,
            last_checked_in_at=at,
        )
        return updated == 1

    def list_for_event(self, event_id: EventId) -> list[Rsvp]:
        return [rsvp_to_domain(r) for r in self._queryset().filter(event_id=event_id.value)]

    def list_for_organizer(self, organizer_id: UserId | None) -> list[Rsvp]:
        queryset = self._queryset()
        if organizer_id is not None:
            queryset = queryset.filter(event__organizer_id=organizer_id.value)
        return [rsvp_to_domain(r) for r in queryset]

    def list_for_user(self, user_id: UserId) -> list[Rsvp]:
        return [rsvp_to_domain(r) for r in self._queryset().filter(user_id=user_id.value)]


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def _queryset(self):
        return models.Ticket.objects.select_related("event", "user")

    def issue_ticket(self, event_id: EventId, user_id: UserId) -> Ticket:
        for attempt in range(1, CODE_ATTEMPTS + 1):
            code = TicketCode.generate()
            try:
                with transaction.atomic():
                    if not capacity.reserve(event_id.value, 1):
                        raise CapacityExceededError(1, capacity.available(event_id.value))
                    ticket = models.Ticket.objects.create(
                        event_id=event_id.value,
                        user_id=user_id.value,
                        ticket_code=code.value,
                    )
            except IntegrityError:
                logger.warning("Ticket code collision on attempt %d", attempt)
                continue
            invalidate_event(event_id.value)
            return self.get_ticket(TicketId(value=ticket.id))
        raise RuntimeError(f"Could not generate a unique ticket code in {CODE_ATTEMPTS} attempts")

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        ticket = self._queryset().filter(pk=ticket_id.value).first()
        return ticket_to_domain(ticket) if ticket else None

    def get_ticket_by_code(self, code: str) -> Ticket | None:
        ticket = self._queryset().filter(ticket_code=code).first()
        return ticket_to_domain(ticket) if ticket else None

    def mark_used(self, ticket_id: TicketId, at: datetime) -> bool:
        updated = models.Ticket.objects.filter(
            pk=ticket_id.value, status=models.TicketStatus.ACTIVE
        ).update(status=models.TicketStatus.USED, is_used=True, checked_in_at=at)
        return updated == 1

    def cancel_ticket(self, ticket_id: TicketId) -> bool:
        ticket = models.Ticket.objects.filter(pk=ticket_id.value).only("event_id").first()
        if ticket is None:
            return False
        with transaction.atomic():
            cancelled = models.Ticket.objects.filter(
                pk=ticket_id.value, status=models.TicketStatus.ACTIVE
            ).update(status=models.TicketStatus.CANCELLED)
            if cancelled != 1:
                return False
            capacity.release(ticket.event_id, 1)
        invalidate_event(ticket.event_id)
        return True

    def list_for_user(self, user_id: UserId) -> list[Ticket]:
        return [ticket_to_domain(t) for t in self._queryset().filter(user_id=user_id.value)]

    def list_for_event(self, event_id: EventId) -> list[Ticket]:
        return [ticket_to_domain(t) for t in self._queryset().filter(event_id=event_id.value)]

    def status_counts(self, organizer_id: UserId | None) -> list[tuple[str, str, str, int]]:
        queryset = models.Ticket.objects.all()
        if organizer_id is not None:
            queryset = queryset.filter(event__organizer_id=organizer_id.value)
        rows = (
            queryset.values("event_id", "event__title", "status")
            .annotate(total=Count("id"))
            .order_by("event__title", "status")
        )
        return [(str(r["event_id"]), r["event__title"], r["status"], r["total"]) for r in rows]
