"""HTTP handlers for RSVPs and tickets."""

from datetime import timedelta

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.handlers.serializers import (
    CheckInByCodeSerializer,
    RsvpCreateSerializer,
    RsvpSerializer,
    TicketAnalyticsSerializer,
    TicketSerializer,
)
from bookings.services.rsvp_service import RsvpService
from bookings.services.ticket_service import TicketService
from bookings.stores.django_store import DjangoRsvpStore, DjangoTicketStore
from common.permissions import IsOrganizerOrAdmin, actor_from_request
from common.responses import success_response
from events.stores.django_store import DjangoEventStore


def get_rsvp_service() -> RsvpService:
    return RsvpService(DjangoRsvpStore(), DjangoEventStore())


def get_ticket_service() -> TicketService:
    return TicketService(
        DjangoTicketStore(),
        DjangoEventStore(),
        entry_window=timedelta(hours=settings.CHECK_IN_WINDOW_HOURS),
    )


def rsvp_list_response(rsvps) -> Response:
    return success_response(
        RsvpSerializer(rsvps, many=True).data,
        count=len(rsvps),
        totalGuests=sum(rsvp.quantity for rsvp in rsvps),
    )


class RsvpCreateView(APIView):
    """Handler for POST /api/events/{event_id}/rsvp"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RsvpCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rsvp = get_rsvp_service().create_rsvp(
            actor_from_request(request), event_id, **serializer.validated_data
        )
        return success_response(
            RsvpSerializer(rsvp).data,
            message="RSVP successful",
            status=status.HTTP_201_CREATED,
        )


class EventRsvpListView(APIView):
    """Handler for GET /api/events/{event_id}/rsvps"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request, event_id: str) -> Response:
        return rsvp_list_response(get_rsvp_service().list_for_event(actor_from_request(request), event_id))


class RsvpListView(APIView):
    """Handler for GET /api/rsvps"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request) -> Response:
        return rsvp_list_response(get_rsvp_service().list_for_actor(actor_from_request(request)))


class UserRsvpListView(APIView):
    """Handler for GET /api/rsvps/user"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return rsvp_list_response(get_rsvp_service().list_for_user(actor_from_request(request)))


class RsvpCheckInView(APIView):
    """Handler for PATCH /api/rsvps/{rsvp_id}/check-in"""

    permission_classes = [IsOrganizerOrAdmin]

    def patch(self, request: Request, rsvp_id: str) -> Response:
        rsvp = get_rsvp_service().check_in(
            actor_from_request(request), rsvp_id, request.data.get("checkedInGuests")
        )
        return success_response(RsvpSerializer(rsvp).data, message="Check-in updated")


class EventTicketView(APIView):
    """Handler for POST/GET /api/events/{event_id}/tickets"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsOrganizerOrAdmin()]
        return [IsAuthenticated()]

    def post(self, request: Request, event_id: str) -> Response:
        ticket = get_ticket_service().issue_ticket(actor_from_request(request), event_id)
        return success_response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)

    def get(self, request: Request, event_id: str) -> Response:
        tickets = get_ticket_service().list_for_event(actor_from_request(request), event_id)
        return success_response(TicketSerializer(tickets, many=True).data, count=len(tickets))


class UserTicketListView(APIView):
    """Handler for GET /api/tickets/user"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        tickets = get_ticket_service().list_for_user(actor_from_request(request))
        return success_response(TicketSerializer(tickets, many=True).data, count=len(tickets))


class TicketAnalyticsView(APIView):
    """Handler for GET /api/tickets/analytics"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request) -> Response:
        analytics = get_ticket_service().analytics(actor_from_request(request))
        return success_response(TicketAnalyticsSerializer(analytics).data)


class TicketByCodeView(APIView):
    """Handler for GET /api/tickets/code/{code}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, code: str) -> Response:
        ticket = get_ticket_service().get_by_code(actor_from_request(request), code)
        return success_response(TicketSerializer(ticket).data)


class CheckInByCodeView(APIView):
    """Handler for PATCH /api/tickets/check-in-by-code"""

    permission_classes = [IsOrganizerOrAdmin]

    def patch(self, request: Request) -> Response:
        serializer = CheckInByCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket = get_ticket_service().check_in_by_code(
            actor_from_request(request),
            serializer.validated_data["ticket_code"],
            serializer.validated_data.get("event_id") or None,
        )
        return success_response({**ticket.summary(), "valid": True}, message="Ticket checked in")


class TicketCheckInView(APIView):
    """Handler for PATCH /api/tickets/{ticket_id}/check-in"""

    permission_classes = [IsOrganizerOrAdmin]

    def patch(self, request: Request, ticket_id: str) -> Response:
        ticket = get_ticket_service().check_in(actor_from_request(request), ticket_id)
        return success_response({**ticket.summary(), "valid": True}, message="Ticket checked in")


class TicketCancelView(APIView):
    """Handler for POST /api/tickets/{ticket_id}/cancel"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, ticket_id: str) -> Response:
        ticket = get_ticket_service().cancel_ticket(actor_from_request(request), ticket_id)
        return success_response(TicketSerializer(ticket).data, message="Ticket cancelled")
