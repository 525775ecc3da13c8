from bookings.domain.models import Rsvp, RsvpDraft, Ticket, TicketAnalytics
from bookings.domain.value_objects import GuestCount, RsvpId, TicketCode, TicketId

__all__ = [
    "Rsvp",
    "RsvpDraft",
    "Ticket",
    "TicketAnalytics",
    "RsvpId",
    "TicketId",
    "TicketCode",
    "GuestCount",
]
