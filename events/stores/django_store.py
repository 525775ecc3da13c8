"""Django ORM implementation of the EventStore."""

from collections.abc import Collection
from datetime import date, datetime, time, timedelta
from typing import Any

from django.db import transaction
from django.db.models import Count, F, Q
from django.utils import timezone

from common.pagination import Page, PageRequest
from common.value_objects import UserId
from events import models
from events.domain import Capacity, Event, EventFilters, EventId, Money
from events.domain.errors import CapacityBelowSoldError
from events.stores.interfaces import EventStore


def to_domain(event: models.Event) -> Event:
    return Event(
        id=EventId(value=event.id),
        title=event.title,
        slug=event.slug,
        description=event.description,
        category=event.category,
        tags=tuple(event.tags or ()),
        price=Money(amount=event.price),
        image_url=event.image_url,
        venue=event.venue,
        address=event.address,
        start_date_time=event.start_date_time,
        end_date_time=event.end_date_time,
        tickets_available=Capacity(value=event.tickets_available),
        tickets_sold=event.tickets_sold,
        rsvp_count=event.rsvp_count,
        is_featured=event.is_featured,
        is_hot=event.is_hot,
        is_unmissable=event.is_unmissable,
        is_published=event.is_published,
        organizer_id=UserId(value=event.organizer_id),
        organizer_name=event.organizer.name,
        organizer_email=event.organizer.email,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM."""

    def _queryset(self):
        return models.Event.objects.select_related("organizer")

    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        queryset = self._queryset().filter(_filter_query(filters)).order_by("-start_date_time")
        rows = queryset[page.offset : page.offset + page.limit]
        return Page(items=[to_domain(e) for e in rows], total=queryset.count(), request=page)

    def list_events_on_date(self, day: date) -> list[Event]:
        tz = timezone.get_current_timezone()
        day_start = timezone.make_aware(datetime.combine(day, time.min), tz)
        next_day = day_start + timedelta(days=1)
        queryset = self._queryset().filter(
            Q(start_date_time__gte=day_start, start_date_time__lt=next_day)
            | Q(start_date_time__lt=next_day, end_date_time__gt=day_start),
            is_published=True,
        )
        return [to_domain(e) for e in queryset.order_by("start_date_time")]

    def get_event(self, event_id: EventId) -> Event | None:
        event = self._queryset().filter(pk=event_id.value).first()
        return to_domain(event) if event else None

    def create_event(self, organizer_id: UserId, fields: dict[str, Any]) -> Event:
        event = models.Event.objects.create(organizer_id=organizer_id.value, **fields)
        return self.get_event(EventId(value=event.id))

    def update_event(self, event_id: EventId, changes: dict[str, Any], capacity: int | None = None) -> Event | None:
        with transaction.atomic():
            event = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            if event is None:
                return None
            if capacity is not None:
                resized = models.Event.objects.filter(pk=event_id.value, tickets_sold__lte=capacity).update(
                    tickets_available=capacity - F("tickets_sold")
                )
                if not resized:
                    raise CapacityBelowSoldError(capacity, event.tickets_sold)
            for name, value in changes.items():
                setattr(event, name, value)
            # Never rewrite counters the booking flow updates concurrently
            update_fields = {*changes, "updated_at"}
            if "title" in changes:
                update_fields.add("slug")
            event.save(update_fields=sorted(update_fields))
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        event = models.Event.objects.filter(pk=event_id.value).first()
        if event is None:
            return False
        event.delete()
        return True

    def category_counts(self) -> dict[str, int]:
        rows = models.Event.objects.values("category").annotate(total=Count("id")).order_by("category")
        return {row["category"]: row["total"] for row in rows}

    def list_events_in_categories(self, categories: Collection[str]) -> list[Event]:
        queryset = self._queryset().filter(category__in=list(categories)).order_by("created_at")
        return [to_domain(e) for e in queryset]


def _filter_query(filters: EventFilters) -> Q:
    query = Q()
    if filters.published_only:
        query &= Q(is_published=True)
    if filters.category:
        query &= Q(category=filters.category)
    if filters.organizer_id:
        query &= Q(organizer_id=filters.organizer_id.value)
    for flag in ("is_featured", "is_hot", "is_unmissable"):
        value = getattr(filters, flag)
        if value is not None:
            query &= Q(**{flag: value})
    if filters.search:
        term = filters.search
        query &= (
            Q(title__icontains=term)
            | Q(description__icontains=term)
            | Q(venue__icontains=term)
            | Q(address__icontains=term)
        )
    return query
