import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

CATEGORY_CHOICES = [
    ("Music", "Music"),
    ("Visual Arts", "Visual Arts"),
    ("Performing Arts", "Performing Arts"),
    ("Film", "Film"),
    ("Lectures", "Lectures"),
    ("Fashion", "Fashion"),
    ("Food", "Food"),
    ("Sports", "Sports"),
    ("Technology", "Technology"),
    ("Health", "Health"),
    ("Business", "Business"),
    ("Lifestyle", "Lifestyle"),
    ("Community", "Community"),
    ("Other", "Other"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=100)),
                ("slug", models.SlugField(blank=True, max_length=120)),
                ("description", models.TextField(max_length=5000)),
                ("category", models.CharField(choices=CATEGORY_CHOICES, max_length=50)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("price", models.PositiveIntegerField(default=0)),
                ("image_url", models.URLField(blank=True, default="", max_length=500)),
                ("venue", models.CharField(max_length=255)),
                ("address", models.CharField(max_length=255)),
                ("start_date_time", models.DateTimeField()),
                ("end_date_time", models.DateTimeField()),
                ("tickets_available", models.PositiveIntegerField()),
                ("tickets_sold", models.PositiveIntegerField(default=0)),
                ("rsvp_count", models.PositiveIntegerField(default=0)),
                ("is_featured", models.BooleanField(default=False)),
                ("is_hot", models.BooleanField(default=False)),
                ("is_unmissable", models.BooleanField(default=False)),
                ("is_published", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organizer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-start_date_time"],
                "indexes": [
                    models.Index(fields=["-start_date_time"], name="event_start_idx"),
                    models.Index(fields=["category"], name="event_category_idx"),
                    models.Index(fields=["organizer", "-created_at"], name="event_organizer_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("end_date_time__gte", models.F("start_date_time"))),
                        name="event_ends_after_start",
                    ),
                ],
            },
        ),
    ]
