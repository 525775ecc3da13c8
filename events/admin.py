from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "category",
        "start_date_time",
        "tickets_available",
        "tickets_sold",
        "is_featured",
        "is_published",
    ]
    list_filter = ["category", "is_featured", "is_hot", "is_unmissable", "is_published"]
    search_fields = ["title", "venue", "address"]
    readonly_fields = ["slug", "tickets_sold", "rsvp_count", "created_at", "updated_at"]
