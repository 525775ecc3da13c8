from bookings.handlers.views import (
    CheckInByCodeView,
    EventRsvpListView,
    EventTicketView,
    RsvpCheckInView,
    RsvpCreateView,
    RsvpListView,
    TicketAnalyticsView,
    TicketByCodeView,
    TicketCancelView,
    TicketCheckInView,
    UserRsvpListView,
    UserTicketListView,
)

__all__ = [
    "RsvpCreateView",
    "EventRsvpListView",
    "RsvpListView",
    "UserRsvpListView",
    "RsvpCheckInView",
    "EventTicketView",
    "UserTicketListView",
    "TicketAnalyticsView",
    "TicketByCodeView",
    "CheckInByCodeView",
    "TicketCheckInView",
    "TicketCancelView",
]
