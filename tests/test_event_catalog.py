"""Integration tests for the event catalog and admin event management.

Run with: pytest tests/test_event_catalog.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.core.management import call_command
from django.utils import timezone
from rest_framework.test import APIClient

from events.domain import EventId
from events.domain.errors import CapacityBelowSoldError
from events.models import Event
from events.stores.django_store import DjangoEventStore


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_returns_paginated_results(self, api_client: APIClient, make_event):
        """Given 12 events, the first page holds 10 and links to the next."""
        for i in range(12):
            make_event(title=f"Event {i}")

        response = api_client.get("/api/events")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 10
        assert body["total"] == 12
        assert body["pagination"] == {"next": {"page": 2, "limit": 10}}

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        body = api_client.get("/api/events").json()
        assert body["data"] == []
        assert body["total"] == 0

    def test_unpublished_events_hidden(self, api_client: APIClient, make_event):
        """Unpublished events are not listed publicly."""
        make_event(title="Draft", is_published=False)
        make_event(title="Live")
        titles = [e["title"] for e in api_client.get("/api/events").json()["data"]]
        assert titles == ["Live"]

    def test_filters_and_search(self, api_client: APIClient, make_event):
        """Category, flag and text filters narrow the list."""
        make_event(title="Rooftop Jazz", category="Music", is_hot=True)
        make_event(title="Startup Pitch", category="Business", venue="Hub")

        assert [e["title"] for e in api_client.get("/api/events?category=Business").json()["data"]] == [
            "Startup Pitch"
        ]
        assert [e["title"] for e in api_client.get("/api/events?isHot=true").json()["data"]] == ["Rooftop Jazz"]
        assert [e["title"] for e in api_client.get("/api/events?q=hub").json()["data"]] == ["Startup Pitch"]

    def test_sorted_by_start_descending(self, api_client: APIClient, make_event):
        """Later events come first."""
        now = timezone.now()
        make_event(title="Soon", start_date_time=now + timedelta(days=1))
        make_event(title="Later", start_date_time=now + timedelta(days=5))
        titles = [e["title"] for e in api_client.get("/api/events").json()["data"]]
        assert titles == ["Later", "Soon"]


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, make_event, organizer):
        """Given event exists, returns event details."""
        event = make_event(title="Jazz Night", tickets_available=25)

        response = api_client.get(f"/api/events/{event.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Jazz Night"
        assert data["slug"] == "jazz-night"
        assert data["ticketsAvailable"] == 25
        assert data["capacity"] == 25
        assert data["organizer"] == {"id": str(organizer.id), "name": organizer.name}

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get(f"/api/events/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "code": "INVALID_EVENT_ID",
            "message": "Invalid event ID format",
        }


@pytest.mark.django_db
class TestEventsByDate:
    """Tests for GET /api/events/date/{day}"""

    def test_returns_events_on_day(self, api_client: APIClient, make_event):
        """Events starting on the day are returned with a count."""
        start = timezone.now().replace(hour=10, minute=0, second=0, microsecond=0) + timedelta(days=3)
        make_event(title="On the day", start_date_time=start)
        make_event(title="Next week", start_date_time=start + timedelta(days=7))

        body = api_client.get(f"/api/events/date/{start.date().isoformat()}").json()

        assert body["count"] == 1
        assert body["data"][0]["title"] == "On the day"

    def test_bad_date_format(self, api_client: APIClient):
        """Malformed dates return VALIDATION_ERROR."""
        response = api_client.get("/api/events/date/2026-13-45")
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.django_db
class TestEventWrites:
    """Tests for POST/PUT/DELETE /api/events"""

    def _payload(self) -> dict:
        start = timezone.now() + timedelta(days=2)
        return {
            "title": "Film Club",
            "description": "Monthly screening",
            "category": "Film",
            "venue": "Cinema",
            "address": "2 High St",
            "startDateTime": start.isoformat(),
            "endDateTime": (start + timedelta(hours=2)).isoformat(),
            "ticketsAvailable": 40,
        }

    def test_organizer_creates_event(self, client_for, organizer):
        """Organizers create events they own."""
        response = client_for(organizer).post("/api/events", self._payload(), format="json")
        assert response.status_code == 201
        assert Event.objects.get(title="Film Club").organizer_id == organizer.id

    def test_attendee_cannot_create(self, client_for, attendee):
        """Plain users get PERMISSION_DENIED."""
        response = client_for(attendee).post("/api/events", self._payload(), format="json")
        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

    def test_anonymous_cannot_create(self, api_client: APIClient):
        """Anonymous writes get NOT_AUTHENTICATED."""
        response = api_client.post("/api/events", self._payload(), format="json")
        assert response.status_code == 401
        assert response.json()["code"] == "NOT_AUTHENTICATED"

    def test_end_before_start_rejected(self, client_for, organizer):
        """An end time before the start time is a validation error."""
        payload = self._payload()
        payload["endDateTime"], payload["startDateTime"] = payload["startDateTime"], payload["endDateTime"]
        response = client_for(organizer).post("/api/events", payload, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_other_organizer_cannot_update(self, client_for, make_user, make_event):
        """Only the owner or an admin may edit an event."""
        event = make_event()
        stranger = make_user("organizer")
        response = client_for(stranger).put(f"/api/events/{event.id}", {"title": "Mine"}, format="json")
        assert response.status_code == 403

    def test_update_keeps_booking_counters(self, client_for, organizer, make_event):
        """Editing an event never rewrites its sold counters."""
        event = make_event(tickets_available=8, tickets_sold=2, rsvp_count=1)
        response = client_for(organizer).put(f"/api/events/{event.id}", {"title": "Renamed"}, format="json")
        assert response.status_code == 200
        event.refresh_from_db()
        assert (event.title, event.slug, event.tickets_sold, event.rsvp_count) == ("Renamed", "renamed", 2, 1)

    def test_update_ignores_tickets_available(self, client_for, organizer, attendee, make_event):
        """A stale remaining-places value cannot undo reservations made since."""
        event = make_event(tickets_available=10)
        client_for(attendee).post(
            f"/api/events/{event.id}/rsvp",
            {"name": "Ann", "email": "ann@example.com", "quantity": 5},
            format="json",
        )

        response = client_for(organizer).put(f"/api/events/{event.id}", {"ticketsAvailable": 10}, format="json")

        assert response.status_code == 200
        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold) == (5, 5)

    def test_update_capacity_keeps_sold_places(self, client_for, organizer, make_event):
        """A new capacity leaves room only for what is not already taken."""
        event = make_event(tickets_available=5, tickets_sold=5)

        response = client_for(organizer).put(f"/api/events/{event.id}", {"capacity": 12}, format="json")

        assert response.status_code == 200
        assert response.json()["data"]["capacity"] == 12
        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold) == (7, 5)

    def test_update_capacity_below_sold(self, client_for, organizer, make_event):
        """Capacity cannot shrink below the places already taken."""
        event = make_event(tickets_available=5, tickets_sold=5)

        response = client_for(organizer).put(
            f"/api/events/{event.id}", {"capacity": 3, "title": "Smaller"}, format="json"
        )

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "CAPACITY_BELOW_SOLD"
        assert body["data"] == {"capacity": 3, "ticketsSold": 5}
        event.refresh_from_db()
        assert event.title != "Smaller"
        assert (event.tickets_available, event.tickets_sold) == (5, 5)

    def test_capacity_checked_at_write(self, make_event):
        """The store re-checks sold places when the service read was stale."""
        event = make_event(tickets_available=2, tickets_sold=8)

        with pytest.raises(CapacityBelowSoldError):
            DjangoEventStore().update_event(EventId(event.id), {"title": "Shrunk"}, capacity=6)

        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold) == (2, 8)
        assert event.title != "Shrunk"

    def test_admin_deletes_event(self, client_for, admin_user, make_event):
        """Admins can delete any event."""
        event = make_event()
        response = client_for(admin_user).delete(f"/api/events/{event.id}")
        assert response.status_code == 200
        assert not Event.objects.filter(pk=event.id).exists()


@pytest.mark.django_db
class TestAdminEventFlags:
    """Tests for PATCH /api/admin/events/{id}"""

    def test_patch_flags(self, client_for, admin_user, make_event):
        """Admins toggle display flags and unknown keys are ignored."""
        event = make_event()
        response = client_for(admin_user).patch(
            f"/api/admin/events/{event.id}", {"isFeatured": True, "title": "Nope"}, format="json"
        )
        assert response.status_code == 200
        event.refresh_from_db()
        assert event.is_featured is True
        assert event.title == "Jazz Night"

    def test_patch_is_idempotent(self, client_for, admin_user, make_event):
        """Applying the same patch twice leaves the same state."""
        event = make_event()
        client = client_for(admin_user)
        first = client.patch(f"/api/admin/events/{event.id}", {"isHot": True}, format="json").json()["data"]
        second = client.patch(f"/api/admin/events/{event.id}", {"isHot": True}, format="json").json()["data"]
        assert first["isHot"] is second["isHot"] is True
        assert Event.objects.filter(is_hot=True).count() == 1

    def test_no_valid_fields(self, client_for, admin_user, make_event):
        """A body with only unknown keys returns NO_VALID_FIELDS."""
        event = make_event()
        response = client_for(admin_user).patch(f"/api/admin/events/{event.id}", {"foo": 1}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "NO_VALID_FIELDS"

    def test_invalid_category_rejected(self, client_for, admin_user, make_event):
        """Categories outside the base set are rejected."""
        event = make_event()
        response = client_for(admin_user).patch(
            f"/api/admin/events/{event.id}", {"category": "Arts"}, format="json"
        )
        assert response.status_code == 400

    def test_organizer_cannot_patch(self, client_for, organizer, make_event):
        """Flag changes are admin-only."""
        event = make_event()
        response = client_for(organizer).patch(f"/api/admin/events/{event.id}", {"isHot": True}, format="json")
        assert response.status_code == 403

    def test_admin_list_includes_unpublished(self, client_for, admin_user, make_event):
        """The admin listing shows drafts too."""
        make_event(is_published=False)
        assert client_for(admin_user).get("/api/admin/events").json()["total"] == 1


@pytest.mark.django_db
class TestCategoryMigration:
    """Tests for category analysis and migration."""

    def test_report_lists_invalid_categories(self, client_for, admin_user, make_event):
        """Legacy categories are reported with their suggested target."""
        make_event(category="Arts")
        make_event(category="Music")

        data = client_for(admin_user).get("/api/admin/categories").json()["data"]

        assert data["counts"] == {"Arts": 1, "Music": 1}
        assert data["invalidCategories"] == ["Arts"]
        assert data["suggestedMapping"] == {"Arts": "Visual Arts"}

    def test_migrate_remaps_legacy_categories(self, client_for, admin_user, make_event):
        """Legacy categories move to base ones; base categories are untouched."""
        arts = make_event(category="Arts")
        workshop = make_event(category="Workshop")
        unknown = make_event(category="Knitting")
        music = make_event(category="Music")

        response = client_for(admin_user).post(
            "/api/admin/categories/migrate", {"overrides": {"Workshop": "Health"}}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["data"]["migrated"] == 3
        categories = {e.pk: e.category for e in Event.objects.all()}
        assert categories[arts.pk] == "Visual Arts"
        assert categories[workshop.pk] == "Health"
        assert categories[unknown.pk] == "Other"
        assert categories[music.pk] == "Music"

    def test_dry_run_changes_nothing(self, client_for, admin_user, make_event):
        """dryRun reports without writing."""
        event = make_event(category="Festival")
        data = client_for(admin_user).post(
            "/api/admin/categories/migrate", {"dryRun": True}, format="json"
        ).json()["data"]
        event.refresh_from_db()
        assert data["examined"] == 1 and data["dryRun"] is True
        assert event.category == "Festival"

    def test_management_command(self, make_event, capsys):
        """migrate_categories remaps in batches from the command line."""
        for _ in range(23):
            make_event(category="Conference")

        call_command("migrate_categories", "--batch-size", "10")

        assert Event.objects.filter(category="Business").count() == 23
        assert "23" in capsys.readouterr().out
