"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import date
from typing import Any

from common.pagination import Page, PageRequest
from common.value_objects import UserId
from events.domain import Event, EventFilters, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        """Return matching events ordered by start_date_time descending."""
        ...

    @abstractmethod
    def list_events_on_date(self, day: date) -> list[Event]:
        """Return published events starting on, or still running during, `day`."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, organizer_id: UserId, fields: dict[str, Any]) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: dict[str, Any], capacity: int | None = None) -> Event | None:
        """Write only the changed fields; return None if the event is gone.

        A new `capacity` sets tickets_available to capacity minus tickets_sold
        in one conditional update.

        Raises:
            CapacityBelowSoldError: If more places are already taken than `capacity`.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event with its RSVPs and tickets."""
        ...

    @abstractmethod
    def category_counts(self) -> dict[str, int]:
        """Return the number of events per stored category value."""
        ...

    @abstractmethod
    def list_events_in_categories(self, categories: Collection[str]) -> list[Event]:
        ...
