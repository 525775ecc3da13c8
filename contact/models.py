"""Django ORM models (persistence layer)."""

import uuid

from django.db import models


class ContactStatus(models.TextChoices):
    NEW = "new", "New"
    IN_PROGRESS = "in-progress", "In progress"
    RESOLVED = "resolved", "Resolved"


class ContactMessage(models.Model):
    """A message submitted through the public contact form."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    email = models.EmailField()
    subject = models.CharField(max_length=200)
    message = models.TextField(max_length=5000)
    status = models.CharField(max_length=20, choices=ContactStatus.choices, default=ContactStatus.NEW)
    notes = models.TextField(blank=True, default="")
    admin_response = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-created_at"], name="contact_status_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.subject} <{self.email}>"
