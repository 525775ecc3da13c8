"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils.text import slugify

from events.categories import BASE_CATEGORIES


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=100)
    slug = models.SlugField(max_length=120, blank=True)
    description = models.TextField(max_length=5000)
    # Choices are not enforced by the database so legacy values survive until migrated
    category = models.CharField(max_length=50, choices=[(c, c) for c in BASE_CATEGORIES])
    tags = models.JSONField(default=list, blank=True)
    price = models.PositiveIntegerField(default=0)
    image_url = models.URLField(max_length=500, blank=True, default="")
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="events"
    )
    venue = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    start_date_time = models.DateTimeField()
    end_date_time = models.DateTimeField()
    tickets_available = models.PositiveIntegerField()
    tickets_sold = models.PositiveIntegerField(default=0)
    rsvp_count = models.PositiveIntegerField(default=0)
    is_featured = models.BooleanField(default=False)
    is_hot = models.BooleanField(default=False)
    is_unmissable = models.BooleanField(default=False)
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-start_date_time"]
        indexes = [
            models.Index(fields=["-start_date_time"], name="event_start_idx"),
            models.Index(fields=["category"], name="event_category_idx"),
            models.Index(fields=["organizer", "-created_at"], name="event_organizer_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date_time__gte=models.F("start_date_time")),
                name="event_ends_after_start",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        self.slug = slugify(self.title)[:120]
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title
