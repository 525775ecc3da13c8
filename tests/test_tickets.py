"""Integration tests for tickets: issuing, check-in and cancellation.

Run with: pytest tests/test_tickets.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from bookings.domain.value_objects import TICKET_CODE_PATTERN
from bookings.models import Ticket, TicketStatus
from events.models import Event


@pytest.fixture
def paid_event(make_event) -> Event:
    return make_event(title="Gala", price=2500, tickets_available=5)


@pytest.fixture
def ticket(client_for, attendee, paid_event) -> Ticket:
    response = client_for(attendee).post(f"/api/events/{paid_event.id}/tickets")
    return Ticket.objects.get(pk=response.json()["data"]["id"])


@pytest.mark.django_db
class TestIssueTicket:
    """Tests for POST /api/events/{id}/tickets"""

    def test_issue_reserves_one_place(self, client_for, attendee, paid_event):
        """Issuing a ticket sells one place and returns a readable code."""
        response = client_for(attendee).post(f"/api/events/{paid_event.id}/tickets")

        assert response.status_code == 201
        data = response.json()["data"]
        assert TICKET_CODE_PATTERN.fullmatch(data["ticketCode"])
        assert data["status"] == "active"
        assert data["attendee"]["email"] == attendee.email
        paid_event.refresh_from_db()
        assert (paid_event.tickets_available, paid_event.tickets_sold) == (4, 1)

    def test_free_event_rejected(self, client_for, attendee, make_event):
        """Free events take RSVPs, not tickets."""
        event = make_event(price=0)
        response = client_for(attendee).post(f"/api/events/{event.id}/tickets")
        assert response.status_code == 400
        assert response.json()["code"] == "TICKET_REQUIRES_PAID_EVENT"

    def test_sold_out(self, client_for, attendee, make_event):
        """The last place goes once; the next request is a conflict."""
        event = make_event(price=1000, tickets_available=1)
        client = client_for(attendee)

        assert client.post(f"/api/events/{event.id}/tickets").status_code == 201
        response = client.post(f"/api/events/{event.id}/tickets")

        assert response.status_code == 409
        assert response.json()["code"] == "CAPACITY_EXCEEDED"
        event.refresh_from_db()
        assert event.tickets_available == 0
        assert Ticket.objects.filter(event=event).count() == 1


@pytest.mark.django_db
class TestTicketCheckIn:
    """Tests for ticket check-in by code and by id."""

    def test_check_in_by_code(self, client_for, organizer, ticket):
        """A valid code is checked in and the attendee is returned."""
        response = client_for(organizer).patch(
            "/api/tickets/check-in-by-code",
            {"ticketCode": ticket.ticket_code.lower()},
            format="json",
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["valid"] is True
        assert data["status"] == "used"
        assert data["attendee"]["name"] == ticket.user.name
        ticket.refresh_from_db()
        assert ticket.is_used and ticket.checked_in_at is not None

    def test_double_check_in_conflict(self, client_for, organizer, ticket):
        """A second check-in reports the ticket was already used."""
        client = client_for(organizer)
        client.patch(f"/api/tickets/{ticket.id}/check-in")
        first_checked_in_at = Ticket.objects.get(pk=ticket.pk).checked_in_at

        response = client.patch(f"/api/tickets/{ticket.id}/check-in")

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "TICKET_ALREADY_USED"
        assert body["data"]["ticket"]["ticketCode"] == ticket.ticket_code
        assert Ticket.objects.get(pk=ticket.pk).checked_in_at == first_checked_in_at

    def test_cancelled_ticket_conflict(self, client_for, organizer, ticket):
        """Cancelled tickets cannot be checked in."""
        Ticket.objects.filter(pk=ticket.pk).update(status=TicketStatus.CANCELLED)
        response = client_for(organizer).patch(
            "/api/tickets/check-in-by-code", {"ticketCode": ticket.ticket_code}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["code"] == "TICKET_CANCELLED"

    def test_unknown_code(self, client_for, organizer):
        """Unknown codes return TICKET_NOT_FOUND."""
        response = client_for(organizer).patch(
            "/api/tickets/check-in-by-code", {"ticketCode": "ZZZZ-ZZZZ-ZZZZ"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "TICKET_NOT_FOUND"

    def test_missing_code(self, client_for, organizer):
        """A body without ticketCode is a validation error."""
        response = client_for(organizer).patch("/api/tickets/check-in-by-code", {}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_code_for_other_event(self, client_for, organizer, ticket, make_event):
        """Scanning at a different event reports not found."""
        other = make_event(title="Other")
        response = client_for(organizer).patch(
            "/api/tickets/check-in-by-code",
            {"ticketCode": ticket.ticket_code, "eventId": str(other.id)},
            format="json",
        )
        assert response.status_code == 404

    def test_other_organizer_denied(self, client_for, make_user, ticket):
        """Only the event's organizer or an admin can check in."""
        response = client_for(make_user("organizer")).patch(f"/api/tickets/{ticket.id}/check-in")
        assert response.status_code == 403
        ticket.refresh_from_db()
        assert ticket.status == TicketStatus.ACTIVE

    def test_too_early(self, client_for, organizer, attendee, make_event):
        """Check-in opens two hours before the start."""
        event = make_event(price=1000, start_date_time=timezone.now() + timedelta(days=1))
        ticket_id = client_for(attendee).post(f"/api/events/{event.id}/tickets").json()["data"]["id"]
        response = client_for(organizer).patch(f"/api/tickets/{ticket_id}/check-in")
        assert response.status_code == 400
        assert response.json()["code"] == "EVENT_NOT_STARTED"

    def test_event_ended(self, client_for, admin_user, attendee, make_event):
        """Check-in closes when the event ends."""
        event = make_event(price=1000, start_date_time=timezone.now() - timedelta(hours=5))
        ticket_id = client_for(attendee).post(f"/api/events/{event.id}/tickets").json()["data"]["id"]
        response = client_for(admin_user).patch(f"/api/tickets/{ticket_id}/check-in")
        assert response.status_code == 400
        assert response.json()["code"] == "EVENT_ENDED"


@pytest.mark.django_db
class TestCancelTicket:
    """Tests for POST /api/tickets/{id}/cancel"""

    def test_cancel_returns_place(self, client_for, attendee, ticket, paid_event):
        """Cancelling an active ticket gives its place back."""
        response = client_for(attendee).post(f"/api/tickets/{ticket.id}/cancel")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "cancelled"
        paid_event.refresh_from_db()
        assert (paid_event.tickets_available, paid_event.tickets_sold) == (5, 0)

    def test_cancel_twice(self, client_for, attendee, ticket, paid_event):
        """A cancelled ticket cannot be cancelled again or release twice."""
        client = client_for(attendee)
        client.post(f"/api/tickets/{ticket.id}/cancel")
        response = client.post(f"/api/tickets/{ticket.id}/cancel")

        assert response.status_code == 400
        assert response.json()["code"] == "TICKET_NOT_CANCELLABLE"
        paid_event.refresh_from_db()
        assert paid_event.tickets_available == 5

    def test_cannot_cancel_others_ticket(self, client_for, make_user, ticket):
        """Users cannot cancel tickets they do not hold."""
        response = client_for(make_user()).post(f"/api/tickets/{ticket.id}/cancel")
        assert response.status_code == 403

    def test_invalid_ticket_id(self, client_for, attendee):
        """Malformed ids return INVALID_ID."""
        response = client_for(attendee).post("/api/tickets/nope/cancel")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"


@pytest.mark.django_db
class TestTicketQueries:
    """Tests for ticket listings and lookups."""

    def test_user_tickets(self, client_for, attendee, ticket):
        """GET /api/tickets/user lists the caller's tickets."""
        body = client_for(attendee).get("/api/tickets/user").json()
        assert body["count"] == 1
        assert body["data"][0]["event"]["title"] == "Gala"

    def test_lookup_by_code(self, client_for, attendee, make_user, ticket):
        """Holders can look up their ticket; strangers cannot."""
        url = f"/api/tickets/code/{ticket.ticket_code}"
        assert client_for(attendee).get(url).status_code == 200
        assert client_for(make_user()).get(url).status_code == 403

    def test_unknown_ticket_id(self, client_for, organizer):
        """Unknown ticket ids return TICKET_NOT_FOUND."""
        response = client_for(organizer).patch(f"/api/tickets/{uuid.uuid4()}/check-in")
        assert response.status_code == 404

    def test_analytics(self, client_for, organizer, attendee, paid_event, ticket):
        """Organizers see counts by status across their events."""
        client_for(attendee).post(f"/api/events/{paid_event.id}/tickets")
        client_for(organizer).patch(f"/api/tickets/{ticket.id}/check-in")

        data = client_for(organizer).get("/api/tickets/analytics").json()["data"]

        assert data["total"] == 2
        assert data["byStatus"] == {"active": 1, "used": 1, "cancelled": 0}
        assert data["byEvent"][0]["title"] == "Gala"
        assert data["byEvent"][0]["total"] == 2

    def test_event_ticket_list_for_organizer(self, client_for, organizer, attendee, paid_event, ticket):
        """Organizers list tickets for their event; attendees cannot."""
        url = f"/api/events/{paid_event.id}/tickets"
        assert client_for(organizer).get(url).json()["count"] == 1
        assert client_for(attendee).get(url).status_code == 403
