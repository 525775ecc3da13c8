from django.urls import path

from bookings.handlers import (
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

urlpatterns = [
    path("events/<str:event_id>/rsvp", RsvpCreateView.as_view(), name="rsvp-create"),
    path("events/<str:event_id>/rsvps", EventRsvpListView.as_view(), name="event-rsvp-list"),
    path("events/<str:event_id>/tickets", EventTicketView.as_view(), name="event-tickets"),
    path("rsvps", RsvpListView.as_view(), name="rsvp-list"),
    path("rsvps/user", UserRsvpListView.as_view(), name="user-rsvp-list"),
    path("rsvps/<str:rsvp_id>/check-in", RsvpCheckInView.as_view(), name="rsvp-check-in"),
    path("tickets/user", UserTicketListView.as_view(), name="user-ticket-list"),
    path("tickets/analytics", TicketAnalyticsView.as_view(), name="ticket-analytics"),
    path("tickets/check-in-by-code", CheckInByCodeView.as_view(), name="ticket-check-in-by-code"),
    path("tickets/code/<str:code>", TicketByCodeView.as_view(), name="ticket-by-code"),
    path("tickets/<str:ticket_id>/check-in", TicketCheckInView.as_view(), name="ticket-check-in"),
    path("tickets/<str:ticket_id>/cancel", TicketCancelView.as_view(), name="ticket-cancel"),
]
