"""Atomic event capacity accounting.

Every change to tickets_available/tickets_sold is a single conditional
UPDATE; the affected row count says whether it applied. Callers must run
these inside the transaction that records the RSVP or ticket.
"""

from uuid import UUID

from django.db.models import F
from django.utils import timezone

from events.models import Event


def reserve(event_id: UUID, quantity: int, count_rsvp: bool = False) -> bool:
    """Move `quantity` places from available to sold if enough remain."""
    changes = {
        "tickets_available": F("tickets_available") - quantity,
        "tickets_sold": F("tickets_sold") + quantity,
        "updated_at": timezone.now(),
    }
    if count_rsvp:
        changes["rsvp_count"] = F("rsvp_count") + 1
    updated = Event.objects.filter(pk=event_id, tickets_available__gte=quantity).update(**changes)
    return updated == 1


def release(event_id: UUID, quantity: int) -> bool:
    """Return `quantity` sold places to the available pool."""
    updated = Event.objects.filter(pk=event_id, tickets_sold__gte=quantity).update(
        tickets_available=F("tickets_available") + quantity,
        tickets_sold=F("tickets_sold") - quantity,
        updated_at=timezone.now(),
    )
    return updated == 1


def available(event_id: UUID) -> int:
    return Event.objects.filter(pk=event_id).values_list("tickets_available", flat=True).first() or 0
