from django.contrib import admin

from bookings.models import Rsvp, Ticket


@admin.register(Rsvp)
class RsvpAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "event", "quantity", "checked_in_guests", "created_at"]
    list_filter = ["event"]
    search_fields = ["name", "email"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["ticket_code", "event", "user", "status", "checked_in_at"]
    list_filter = ["status", "event"]
    search_fields = ["ticket_code", "user__email"]
    readonly_fields = ["ticket_code", "created_at"]
