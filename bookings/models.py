"""Django ORM models (persistence layer).

Capacity and check-in invariants are backed by database constraints;
domain logic lives in bookings/domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from events.models import Event

MAX_GUESTS_PER_RSVP = 10


class Rsvp(models.Model):
    """Persistence model for RSVPs to free events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="rsvps")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="rsvps",
    )
    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=30, blank=True, default="")
    quantity = models.PositiveSmallIntegerField()
    checked_in_guests = models.PositiveSmallIntegerField(default=0)
    last_checked_in_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["event", "email"], name="unique_rsvp_per_event_email"),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1, quantity__lte=MAX_GUESTS_PER_RSVP),
                name="rsvp_quantity_in_range",
            ),
            models.CheckConstraint(
                condition=models.Q(checked_in_guests__lte=models.F("quantity")),
                name="rsvp_checked_in_within_quantity",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="rsvp_user_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity} - {self.event_id}"


class TicketStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    USED = "used", "Used"
    CANCELLED = "cancelled", "Cancelled"


class Ticket(models.Model):
    """Persistence model for tickets to paid events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_code = models.CharField(max_length=14, unique=True)
    status = models.CharField(max_length=10, choices=TicketStatus.choices, default=TicketStatus.ACTIVE)
    is_used = models.BooleanField(default=False)
    checked_in_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "event"], name="ticket_user_event_idx"),
            models.Index(fields=["event", "status"], name="ticket_event_status_idx"),
        ]

    def __str__(self) -> str:
        return self.ticket_code
