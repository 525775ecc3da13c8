"""Integration tests for RSVPs and guest check-in.

Run with: pytest tests/test_rsvps.py -v
"""

import uuid
from smtplib import SMTPException
from unittest.mock import Mock, patch

import pytest
from django.db import IntegrityError, transaction
from rest_framework.test import APIClient

from bookings.domain import GuestCount, RsvpDraft
from bookings.domain.errors import AlreadyRsvpedError, CapacityExceededError
from bookings.models import Rsvp
from bookings.services.rsvp_service import RsvpService
from bookings.stores.django_store import DjangoRsvpStore
from events.domain import EventId
from events.models import Event
from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore


def rsvp_body(**overrides) -> dict:
    body = {"name": "Ada Lovelace", "email": "ada@example.com", "phone": "555-0100", "quantity": 2}
    body.update(overrides)
    return body


@pytest.mark.django_db
class TestCreateRsvp:
    """Tests for POST /api/events/{id}/rsvp"""

    def test_rsvp_reserves_capacity(self, client_for, attendee, make_event):
        """A successful RSVP moves places from available to sold."""
        event = make_event(tickets_available=10)

        response = client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["quantity"] == 2
        assert data["checkInStatus"] == "none"
        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold, event.rsvp_count) == (8, 2, 1)

    def test_duplicate_email_conflict(self, client_for, attendee, make_event):
        """A second RSVP from the same email, in any case, is a conflict."""
        event = make_event()
        client = client_for(attendee)
        client.post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")

        response = client.post(
            f"/api/events/{event.id}/rsvp", rsvp_body(email="ADA@example.com"), format="json"
        )

        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_RSVPED"
        event.refresh_from_db()
        assert event.tickets_sold == 2

    def test_paid_event_rejected(self, client_for, attendee, make_event):
        """Paid events do not take RSVPs."""
        event = make_event(price=1500)
        response = client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "RSVP_REQUIRES_FREE_EVENT"

    def test_capacity_exceeded_leaves_counters(self, client_for, attendee, make_event):
        """Asking for more than remains is rejected without mutation."""
        event = make_event(tickets_available=1)

        response = client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "CAPACITY_EXCEEDED"
        assert body["data"] == {"requested": 2, "available": 1}
        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold, event.rsvp_count) == (1, 0, 0)

    @pytest.mark.parametrize("quantity", [0, 11])
    def test_quantity_out_of_range(self, client_for, attendee, make_event, quantity):
        """Quantities outside 1..10 are a validation error."""
        event = make_event()
        response = client_for(attendee).post(
            f"/api/events/{event.id}/rsvp", rsvp_body(quantity=quantity), format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_missing_fields(self, client_for, attendee, make_event):
        """Name and email are required."""
        event = make_event()
        response = client_for(attendee).post(f"/api/events/{event.id}/rsvp", {"quantity": 1}, format="json")
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"name", "email"}

    def test_event_not_found(self, client_for, attendee):
        """Unknown events return EVENT_NOT_FOUND."""
        response = client_for(attendee).post(f"/api/events/{uuid.uuid4()}/rsvp", rsvp_body(), format="json")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_requires_authentication(self, api_client: APIClient, make_event):
        """Anonymous RSVPs are rejected."""
        event = make_event()
        response = api_client.post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")
        assert response.status_code == 401

    def test_organizer_is_notified(self, client_for, attendee, organizer, make_event, mailoutbox):
        """The organizer receives an email about the RSVP."""
        event = make_event()
        client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")
        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == [organizer.email]

    def test_email_failure_does_not_fail_rsvp(self, client_for, attendee, make_event):
        """A failing mail server is logged and ignored."""
        event = make_event()
        with patch("common.notifications.send_mail", side_effect=SMTPException("down")):
            response = client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")
        assert response.status_code == 201
        assert Rsvp.objects.count() == 1


@pytest.mark.django_db
class TestCapacityAccounting:
    """Capacity is never overdrawn, even when the event was read earlier."""

    def _draft(self, email: str, quantity: int) -> RsvpDraft:
        return RsvpDraft(name="Guest", email=email, phone="", quantity=GuestCount(quantity))

    def test_successive_reservations_stop_at_capacity(self, make_event):
        """Once places run out the store refuses further reservations."""
        event = make_event(tickets_available=5)
        store = DjangoRsvpStore()
        event_id = EventId(event.id)

        store.create_rsvp(event_id, None, self._draft("a@example.com", 3))
        with pytest.raises(CapacityExceededError):
            store.create_rsvp(event_id, None, self._draft("b@example.com", 3))
        store.create_rsvp(event_id, None, self._draft("c@example.com", 2))

        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold, event.rsvp_count) == (0, 5, 2)
        assert Rsvp.objects.count() == 2

    def test_stale_event_read_cannot_overbook(self, make_event, organizer):
        """A service holding an outdated event still cannot oversell."""
        event = make_event(tickets_available=4)
        stale = DjangoEventStore().get_event(EventId(event.id))
        events = Mock(spec=EventStore)
        events.get_event.return_value = stale
        service = RsvpService(DjangoRsvpStore(), events)

        service.create_rsvp(None, str(event.id), "First", "first@example.com", "", 3)
        with pytest.raises(CapacityExceededError):
            service.create_rsvp(None, str(event.id), "Second", "second@example.com", "", 3)

        event.refresh_from_db()
        assert event.tickets_available == 1
        assert event.tickets_sold + event.tickets_available == 4

    def test_duplicate_rolls_back_reservation(self, make_event):
        """A unique-constraint conflict leaves counters as they were."""
        event = make_event(tickets_available=5)
        store = DjangoRsvpStore()
        store.create_rsvp(EventId(event.id), None, self._draft("a@example.com", 1))

        with pytest.raises(AlreadyRsvpedError):
            store.create_rsvp(EventId(event.id), None, self._draft("a@example.com", 2))

        event.refresh_from_db()
        assert (event.tickets_available, event.tickets_sold) == (4, 1)


@pytest.mark.django_db
class TestRsvpCheckIn:
    """Tests for PATCH /api/rsvps/{id}/check-in"""

    def _rsvp(self, make_event, quantity: int = 3) -> Rsvp:
        event = make_event()
        return Rsvp.objects.create(event=event, name="Ada", email="ada@example.com", quantity=quantity)

    def test_partial_then_full(self, client_for, organizer, make_event):
        """Check-in status follows the checked-in count."""
        rsvp = self._rsvp(make_event)
        client = client_for(organizer)

        partial = client.patch(f"/api/rsvps/{rsvp.id}/check-in", {"checkedInGuests": 2}, format="json")
        full = client.patch(f"/api/rsvps/{rsvp.id}/check-in", {"checkedInGuests": 3}, format="json")

        assert partial.json()["data"]["checkInStatus"] == "partial"
        assert full.json()["data"]["checkInStatus"] == "full"
        rsvp.refresh_from_db()
        assert rsvp.checked_in_guests == 3
        assert rsvp.last_checked_in_at is not None

    @pytest.mark.parametrize("value", [4, -1, "two"])
    def test_out_of_bounds_rejected(self, client_for, organizer, make_event, value):
        """Counts outside 0..quantity are rejected and nothing changes."""
        rsvp = self._rsvp(make_event)
        response = client_for(organizer).patch(
            f"/api/rsvps/{rsvp.id}/check-in", {"checkedInGuests": value}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CHECK_IN_COUNT"
        rsvp.refresh_from_db()
        assert rsvp.checked_in_guests == 0

    def test_database_rejects_overcount(self, make_event):
        """The check constraint backs the bound at the storage level."""
        rsvp = self._rsvp(make_event, quantity=2)
        with pytest.raises(IntegrityError), transaction.atomic():
            Rsvp.objects.filter(pk=rsvp.pk).update(checked_in_guests=5)

    def test_other_organizer_denied(self, client_for, make_user, make_event):
        """Organizers of other events cannot check guests in."""
        rsvp = self._rsvp(make_event)
        response = client_for(make_user("organizer")).patch(
            f"/api/rsvps/{rsvp.id}/check-in", {"checkedInGuests": 1}, format="json"
        )
        assert response.status_code == 403

    def test_unknown_rsvp(self, client_for, admin_user):
        """Unknown RSVP ids return RSVP_NOT_FOUND."""
        response = client_for(admin_user).patch(
            f"/api/rsvps/{uuid.uuid4()}/check-in", {"checkedInGuests": 1}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "RSVP_NOT_FOUND"


@pytest.mark.django_db
class TestRsvpListings:
    """Tests for RSVP listings."""

    def test_event_rsvps_with_guest_total(self, client_for, organizer, attendee, make_event):
        """The event listing reports count and total guests."""
        event = make_event()
        client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(quantity=3), format="json")
        client_for(attendee).post(
            f"/api/events/{event.id}/rsvp", rsvp_body(email="bob@example.com", quantity=2), format="json"
        )

        body = client_for(organizer).get(f"/api/events/{event.id}/rsvps").json()

        assert body["count"] == 2
        assert body["totalGuests"] == 5

    def test_organizer_sees_only_own_events(self, client_for, organizer, make_user, make_event):
        """GET /api/rsvps is scoped to the organizer's events; admins see all."""
        mine = make_event()
        theirs = make_event(organizer=make_user("organizer"))
        Rsvp.objects.create(event=mine, name="A", email="a@example.com", quantity=1)
        Rsvp.objects.create(event=theirs, name="B", email="b@example.com", quantity=1)
        admin = make_user("admin")

        assert client_for(organizer).get("/api/rsvps").json()["count"] == 1
        assert client_for(admin).get("/api/rsvps").json()["count"] == 2

    def test_user_rsvps(self, client_for, attendee, make_event):
        """GET /api/rsvps/user returns the caller's RSVPs."""
        event = make_event()
        client_for(attendee).post(f"/api/events/{event.id}/rsvp", rsvp_body(), format="json")
        body = client_for(attendee).get("/api/rsvps/user").json()
        assert body["count"] == 1
        assert body["data"][0]["event"]["title"] == event.title

    def test_attendee_cannot_list_event_rsvps(self, client_for, attendee, make_event):
        """Plain users are denied organizer listings."""
        event = make_event()
        assert client_for(attendee).get(f"/api/events/{event.id}/rsvps").status_code == 403

    def test_rsvp_without_user(self, make_event):
        """RSVPs made without an actor are stored without a user."""
        event = make_event()
        rsvp = RsvpService(DjangoRsvpStore(), DjangoEventStore()).create_rsvp(
            None, str(event.id), "Walk In", "walkin@example.com", "", 1
        )
        assert rsvp.user_id is None
        assert Event.objects.get(pk=event.id).rsvp_count == 1
