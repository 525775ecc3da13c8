"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
import re
from datetime import date, datetime
from typing import Any

from common.errors import PermissionDeniedError, ValidationFailedError
from common.pagination import Page, PageRequest
from common.value_objects import Actor
from events.categories import is_base_category
from events.domain import Event, EventFilters, EventId
from events.domain.errors import (
    CapacityBelowSoldError,
    EventNotFoundError,
    InvalidCategoryError,
    InvalidEventIdError,
    NoValidFieldsError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
FLAG_FIELDS = ("is_featured", "is_hot", "is_unmissable", "is_published", "category")


def parse_event_id(event_id: str) -> EventId:
    """Parse a path parameter into an EventId.

    Raises:
        InvalidEventIdError: If the value is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        """Return a page of events matching `filters`."""
        return self._store.list_events(filters, page)

    def list_events_on_date(self, day: str) -> list[Event]:
        """Return events happening on a YYYY-MM-DD date.

        Raises:
            ValidationFailedError: If the date is not in YYYY-MM-DD format.
        """
        if not DATE_PATTERN.fullmatch(day):
            raise ValidationFailedError("Please provide a valid date in YYYY-MM-DD format")
        try:
            parsed = date.fromisoformat(day)
        except ValueError:
            raise ValidationFailedError("Please provide a valid date in YYYY-MM-DD format") from None
        return self._store.list_events_on_date(parsed)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, actor: Actor, fields: dict[str, Any]) -> Event:
        """Create an event owned by the acting organizer."""
        _check_schedule(fields.get("start_date_time"), fields.get("end_date_time"))
        _check_category(fields.get("category"))
        event = self._store.create_event(actor.id, fields)
        logger.info("Event %s created by %s", event.id, actor.id)
        return event

    def update_event(self, actor: Actor, event_id: str, changes: dict[str, Any]) -> Event:
        """Apply an organizer's edit to their event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            PermissionDeniedError: If the actor neither owns the event nor is an admin.
            CapacityBelowSoldError: If `capacity` is lower than the places already taken.
        """
        event = self.get_event(event_id)
        _check_owner(actor, event, "update")
        changes = dict(changes)
        capacity = changes.pop("capacity", None)
        if capacity is not None and capacity < event.tickets_sold:
            raise CapacityBelowSoldError(capacity, event.tickets_sold)
        _check_schedule(
            changes.get("start_date_time", event.start_date_time),
            changes.get("end_date_time", event.end_date_time),
        )
        if "category" in changes:
            _check_category(changes["category"])
        updated = self._store.update_event(event.id, changes, capacity=capacity)
        if updated is None:
            raise EventNotFoundError(event_id)
        logger.info("Event %s updated by %s", event.id, actor.id)
        return updated

    def delete_event(self, actor: Actor, event_id: str) -> None:
        """Delete an event; its RSVPs and tickets are removed with it."""
        event = self.get_event(event_id)
        _check_owner(actor, event, "delete")
        if not self._store.delete_event(event.id):
            raise EventNotFoundError(event_id)
        logger.info("Event %s deleted by %s", event.id, actor.id)

    def update_flags(self, event_id: str, changes: dict[str, Any]) -> Event:
        """Set admin display flags or category on an event.

        Only FLAG_FIELDS are applied. Setting a value the event already has
        leaves it unchanged.

        Raises:
            NoValidFieldsError: If `changes` has none of FLAG_FIELDS.
            InvalidCategoryError: If the category is not a base category.
        """
        patch = {name: value for name, value in changes.items() if name in FLAG_FIELDS}
        if not patch:
            raise NoValidFieldsError()
        if "category" in patch:
            _check_category(patch["category"])
        event = self.get_event(event_id)
        updated = self._store.update_event(event.id, patch)
        if updated is None:
            raise EventNotFoundError(event_id)
        logger.info("Event %s flags updated: %s", event.id, sorted(patch))
        return updated


def _check_owner(actor: Actor, event: Event, action: str) -> None:
    if not (actor.is_admin or event.is_owned_by(actor.id)):
        raise PermissionDeniedError(f"Not authorized to {action} this event")


def _check_schedule(start: datetime | None, end: datetime | None) -> None:
    if start is not None and end is not None and end < start:
        raise ValidationFailedError("Event end time must be after its start time")


def _check_category(category: str | None) -> None:
    if category is not None and not is_base_category(category):
        raise InvalidCategoryError(category)
