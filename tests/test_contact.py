"""Integration tests for contact messages.

Run with: pytest tests/test_contact.py -v
"""

import uuid
from smtplib import SMTPException
from unittest.mock import patch

import pytest
from django.test import override_settings
from rest_framework.test import APIClient

from contact.models import ContactMessage

MESSAGE = {
    "name": "Grace Hopper",
    "email": "Grace@Example.com",
    "subject": "Venue access",
    "message": "Is the venue wheelchair accessible?",
}


@pytest.mark.django_db
class TestSubmitContact:
    """Tests for POST /api/contact"""

    @override_settings(ADMIN_EMAIL="support@lume.test")
    def test_submit_creates_message(self, api_client: APIClient, mailoutbox):
        """A complete message is stored as new and the admin is emailed."""
        response = api_client.post("/api/contact", MESSAGE, format="json")

        assert response.status_code == 201
        contact = ContactMessage.objects.get(pk=response.json()["data"]["id"])
        assert contact.status == "new"
        assert contact.email == "grace@example.com"
        assert mailoutbox[0].to == ["support@lume.test"]

    @pytest.mark.parametrize("missing", ["name", "email", "subject", "message"])
    def test_missing_field_rejected(self, api_client: APIClient, missing):
        """Every field is required and nothing is stored otherwise."""
        body = {k: v for k, v in MESSAGE.items() if k != missing}
        response = api_client.post("/api/contact", body, format="json")
        assert response.status_code == 400
        assert ContactMessage.objects.count() == 0

    def test_email_failure_still_succeeds(self, api_client: APIClient):
        """A failed admin notification does not fail the submission."""
        with patch("common.notifications.send_mail", side_effect=SMTPException("down")):
            response = api_client.post("/api/contact", MESSAGE, format="json")
        assert response.status_code == 201
        assert ContactMessage.objects.count() == 1


@pytest.mark.django_db
class TestAdminContact:
    """Tests for GET /api/contact and PATCH /api/contact/{id}"""

    def _message(self, **overrides) -> ContactMessage:
        fields = {k: v for k, v in MESSAGE.items()}
        fields.update(overrides)
        return ContactMessage.objects.create(**fields)

    def test_list_filtered_by_status(self, client_for, admin_user):
        """Admins list messages newest first, optionally by status."""
        self._message(subject="Old", status="resolved")
        self._message(subject="Fresh")

        everything = client_for(admin_user).get("/api/contact").json()
        fresh = client_for(admin_user).get("/api/contact?status=new").json()

        assert everything["total"] == 2
        assert [m["subject"] for m in fresh["data"]] == ["Fresh"]

    def test_non_admin_cannot_list(self, client_for, organizer):
        """Listing is admin-only."""
        assert client_for(organizer).get("/api/contact").status_code == 403

    def test_update_status(self, client_for, admin_user):
        """Admins move a message along and record a response."""
        contact = self._message()
        response = client_for(admin_user).patch(
            f"/api/contact/{contact.id}",
            {"status": "resolved", "adminResponse": "Yes, step-free access."},
            format="json",
        )
        assert response.status_code == 200
        contact.refresh_from_db()
        assert contact.status == "resolved"
        assert contact.admin_response == "Yes, step-free access."

    def test_invalid_status(self, client_for, admin_user):
        """Unknown statuses return INVALID_STATUS."""
        contact = self._message()
        response = client_for(admin_user).patch(f"/api/contact/{contact.id}", {"status": "done"}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"

    def test_unknown_message(self, client_for, admin_user):
        """Unknown ids return CONTACT_NOT_FOUND."""
        response = client_for(admin_user).patch(
            f"/api/contact/{uuid.uuid4()}", {"status": "resolved"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "CONTACT_NOT_FOUND"
