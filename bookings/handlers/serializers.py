"""Serializers for RSVP and ticket requests and responses."""

from rest_framework import serializers

from bookings.domain.value_objects import MAX_GUESTS


class RsvpSerializer(serializers.Serializer):
    """Serializer for Rsvp domain model."""

    id = serializers.UUIDField(source="id.value")
    event = serializers.SerializerMethodField()
    user = serializers.SerializerMethodField()
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    quantity = serializers.IntegerField()
    checkedInGuests = serializers.IntegerField(source="checked_in_guests")
    checkInStatus = serializers.CharField(source="check_in_status")
    lastCheckedInAt = serializers.DateTimeField(source="last_checked_in_at", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")

    def get_event(self, obj) -> dict:
        return {"id": str(obj.event_id), "title": obj.event_title}

    def get_user(self, obj) -> str | None:
        return str(obj.user_id) if obj.user_id else None


class RsvpCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_GUESTS)


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    ticketCode = serializers.CharField(source="ticket_code.value")
    status = serializers.CharField()
    isUsed = serializers.BooleanField(source="is_used")
    checkedInAt = serializers.DateTimeField(source="checked_in_at", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    event = serializers.SerializerMethodField()
    attendee = serializers.SerializerMethodField()

    def get_event(self, obj) -> dict:
        return {
            "id": str(obj.event_id),
            "title": obj.event_title,
            "startDateTime": obj.event_start.isoformat(),
            "venue": obj.event_venue,
        }

    def get_attendee(self, obj) -> dict:
        return {"id": str(obj.user_id), "name": obj.attendee_name, "email": obj.attendee_email}


class CheckInByCodeSerializer(serializers.Serializer):
    ticketCode = serializers.CharField(source="ticket_code", max_length=20)
    eventId = serializers.CharField(source="event_id", required=False, allow_blank=True)


class TicketAnalyticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    byStatus = serializers.DictField(source="by_status", child=serializers.IntegerField())
    byEvent = serializers.SerializerMethodField()

    def get_byEvent(self, obj) -> list[dict]:
        return [
            {"eventId": event_id, "title": stats.title, "total": stats.total, **stats.counts}
            for event_id, stats in obj.by_event.items()
        ]
