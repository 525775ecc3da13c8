"""Serializers for transforming event domain models to API responses."""

from rest_framework import serializers

from events.categories import BASE_CATEGORIES


class OrganizerRefSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="organizer_id.value")
    name = serializers.CharField(source="organizer_name")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    price = serializers.IntegerField(source="price.amount")
    image = serializers.CharField(source="image_url")
    venue = serializers.CharField()
    address = serializers.CharField()
    startDateTime = serializers.DateTimeField(source="start_date_time")
    endDateTime = serializers.DateTimeField(source="end_date_time")
    ticketsAvailable = serializers.IntegerField(source="tickets_available.value")
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    capacity = serializers.IntegerField()
    rsvpCount = serializers.IntegerField(source="rsvp_count")
    isFeatured = serializers.BooleanField(source="is_featured")
    isHot = serializers.BooleanField(source="is_hot")
    isUnmissable = serializers.BooleanField(source="is_unmissable")
    isPublished = serializers.BooleanField(source="is_published")
    organizer = OrganizerRefSerializer(source="*")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventWriteSerializer(serializers.Serializer):
    """Validates event create (full) and update (partial) bodies."""

    title = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=5000)
    category = serializers.ChoiceField(choices=BASE_CATEGORIES)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    price = serializers.IntegerField(min_value=0, required=False)
    image = serializers.URLField(source="image_url", max_length=500, required=False, allow_blank=True)
    venue = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=255)
    startDateTime = serializers.DateTimeField(source="start_date_time")
    endDateTime = serializers.DateTimeField(source="end_date_time")
    ticketsAvailable = serializers.IntegerField(source="tickets_available", min_value=0)

    def validate(self, attrs):
        start = attrs.get("start_date_time")
        end = attrs.get("end_date_time")
        if start and end and end < start:
            raise serializers.ValidationError({"endDateTime": "End time must be after start time"})
        return attrs


class EventUpdateSerializer(EventWriteSerializer):
    """Edits take the total capacity; remaining places follow from sales."""

    ticketsAvailable = None
    capacity = serializers.IntegerField(min_value=0, required=False)


class EventFlagsSerializer(serializers.Serializer):
    """Admin-patchable fields. Unknown keys are ignored."""

    isFeatured = serializers.BooleanField(source="is_featured", required=False)
    isHot = serializers.BooleanField(source="is_hot", required=False)
    isUnmissable = serializers.BooleanField(source="is_unmissable", required=False)
    isPublished = serializers.BooleanField(source="is_published", required=False)
    category = serializers.ChoiceField(choices=BASE_CATEGORIES, required=False)


class CategoryReportSerializer(serializers.Serializer):
    counts = serializers.DictField(child=serializers.IntegerField())
    invalidCategories = serializers.ListField(source="invalid_categories", child=serializers.CharField())
    suggestedMapping = serializers.DictField(source="suggested_mapping", child=serializers.CharField())
    baseCategories = serializers.SerializerMethodField()

    def get_baseCategories(self, obj) -> list[str]:
        return list(BASE_CATEGORIES)


class CategoryMigrationRequestSerializer(serializers.Serializer):
    overrides = serializers.DictField(child=serializers.ChoiceField(choices=BASE_CATEGORIES), required=False)
    dryRun = serializers.BooleanField(source="dry_run", required=False, default=False)


class MigrationResultSerializer(serializers.Serializer):
    examined = serializers.IntegerField()
    migrated = serializers.IntegerField()
    failed = serializers.IntegerField()
    mapping = serializers.DictField(child=serializers.CharField())
    dryRun = serializers.BooleanField(source="dry_run")
    failedEventIds = serializers.ListField(source="failed_event_ids", child=serializers.CharField())
