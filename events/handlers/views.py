"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import SAFE_METHODS, AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.errors import InvalidIdError
from common.pagination import PageRequest
from common.permissions import IsAdmin, IsOrganizerOrAdmin, actor_from_request
from common.responses import page_response, success_response
from common.value_objects import UserId
from events import cache
from events.domain import EventFilters
from events.handlers.serializers import (
    CategoryMigrationRequestSerializer,
    CategoryReportSerializer,
    EventFlagsSerializer,
    EventSerializer,
    EventUpdateSerializer,
    EventWriteSerializer,
    MigrationResultSerializer,
)
from events.services.category_migration import CategoryMigrationService
from events.services.event_service import EventService, parse_event_id
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def filters_from_query(params, published_only: bool = True) -> EventFilters:
    organizer_id = None
    if params.get("organizer"):
        try:
            organizer_id = UserId.from_string(params["organizer"])
        except ValueError:
            raise InvalidIdError("organizer") from None
    return EventFilters(
        category=params.get("category") or None,
        organizer_id=organizer_id,
        is_featured=_flag(params.get("isFeatured")),
        is_hot=_flag(params.get("isHot")),
        is_unmissable=_flag(params.get("isUnmissable")),
        search=(params.get("q") or "").strip() or None,
        published_only=published_only,
    )


def _flag(value: str | None) -> bool | None:
    if value is None:
        return None
    return value.lower() in ("1", "true", "yes")


class ReadPublicWriteOrganizer(IsOrganizerOrAdmin):
    def has_permission(self, request: Request, view) -> bool:
        return request.method in SAFE_METHODS or super().has_permission(request, view)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [ReadPublicWriteOrganizer]

    def get(self, request: Request) -> Response:
        key = cache.list_key(request.query_params)
        body = cache.fetch(key)
        if body is None:
            page = get_event_service().list_events(
                filters_from_query(request.query_params),
                PageRequest.from_query(request.query_params),
            )
            body = page_response(page, EventSerializer(page.items, many=True).data).data
            cache.store(key, body)
        return Response(body)

    def post(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(actor_from_request(request), serializer.validated_data)
        return success_response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    permission_classes = [ReadPublicWriteOrganizer]

    def get(self, request: Request, event_id: str) -> Response:
        key = cache.detail_key(parse_event_id(event_id).value)
        body = cache.fetch(key)
        if body is None:
            event = get_event_service().get_event(event_id)
            body = success_response(EventSerializer(event).data).data
            cache.store(key, body)
        return Response(body)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(
            actor_from_request(request), event_id, serializer.validated_data
        )
        return success_response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(actor_from_request(request), event_id)
        return success_response(message="Event deleted")


class EventsByDateView(APIView):
    """Handler for GET /api/events/date/{day}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, day: str) -> Response:
        events = get_event_service().list_events_on_date(day)
        return success_response(EventSerializer(events, many=True).data, count=len(events))


class AdminEventListView(APIView):
    """Handler for GET /api/admin/events"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        page = get_event_service().list_events(
            filters_from_query(request.query_params, published_only=False),
            PageRequest.from_query(request.query_params),
        )
        return page_response(page, EventSerializer(page.items, many=True).data)


class AdminEventDetailView(APIView):
    """Handler for PATCH/DELETE /api/admin/events/{event_id}"""

    permission_classes = [IsAdmin]

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventFlagsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_flags(event_id, serializer.validated_data)
        return success_response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(actor_from_request(request), event_id)
        return success_response(message="Event deleted")


class CategoryReportView(APIView):
    """Handler for GET /api/admin/categories"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        report = CategoryMigrationService(DjangoEventStore()).analyze()
        return success_response(CategoryReportSerializer(report).data)


class CategoryMigrationView(APIView):
    """Handler for POST /api/admin/categories/migrate"""

    permission_classes = [IsAdmin]

    def post(self, request: Request) -> Response:
        serializer = CategoryMigrationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = CategoryMigrationService(DjangoEventStore()).migrate(
            overrides=serializer.validated_data.get("overrides"),
            dry_run=serializer.validated_data["dry_run"],
        )
        return success_response(
            MigrationResultSerializer(result).data,
            message=f"Migrated {result.migrated} events, {result.failed} failed",
        )
