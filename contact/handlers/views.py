"""HTTP handlers for the contact form."""

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.pagination import PageRequest
from common.permissions import IsAdmin
from common.responses import page_response, success_response
from contact.domain import ContactUpdate
from contact.handlers.serializers import (
    ContactMessageSerializer,
    ContactSubmitSerializer,
    ContactUpdateSerializer,
)
from contact.services.contact_service import ContactService
from contact.stores.django_store import DjangoContactStore


def get_contact_service() -> ContactService:
    return ContactService(DjangoContactStore(), admin_email=settings.ADMIN_EMAIL)


class ContactListView(APIView):
    """Handler for POST (public) and GET (admin) /api/contact"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [AllowAny()]
        return [IsAdmin()]

    def post(self, request: Request) -> Response:
        serializer = ContactSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = get_contact_service().submit(**serializer.validated_data)
        return success_response(
            {"id": str(contact.id)},
            message="Your message has been sent successfully",
            status=status.HTTP_201_CREATED,
        )

    def get(self, request: Request) -> Response:
        page = get_contact_service().list_messages(
            request.query_params.get("status"),
            PageRequest.from_query(request.query_params),
        )
        return page_response(page, ContactMessageSerializer(page.items, many=True).data)


class ContactDetailView(APIView):
    """Handler for PATCH /api/contact/{contact_id}"""

    permission_classes = [IsAdmin]

    def patch(self, request: Request, contact_id: str) -> Response:
        serializer = ContactUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = get_contact_service().update_status(contact_id, ContactUpdate(**serializer.validated_data))
        return success_response(ContactMessageSerializer(contact).data, message="Contact message updated")
