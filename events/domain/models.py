"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime

from common.value_objects import UserId
from events.domain.value_objects import Capacity, EventId, Money


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    category: str
    tags: tuple[str, ...]
    price: Money
    image_url: str
    venue: str
    address: str
    start_date_time: datetime
    end_date_time: datetime
    tickets_available: Capacity
    tickets_sold: int
    rsvp_count: int
    is_featured: bool
    is_hot: bool
    is_unmissable: bool
    is_published: bool
    organizer_id: UserId
    organizer_name: str
    organizer_email: str
    created_at: datetime
    updated_at: datetime

    @property
    def capacity(self) -> int:
        return self.tickets_available.value + self.tickets_sold

    @property
    def is_free(self) -> bool:
        return self.price.is_zero

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.organizer_id == user_id


@dataclass(frozen=True)
class EventFilters:
    """Criteria for event listings."""

    category: str | None = None
    organizer_id: UserId | None = None
    is_featured: bool | None = None
    is_hot: bool | None = None
    is_unmissable: bool | None = None
    search: str | None = None
    published_only: bool = True


@dataclass(frozen=True)
class CategoryReport:
    """Category usage across all events."""

    counts: dict[str, int]
    invalid_categories: tuple[str, ...]
    suggested_mapping: dict[str, str]


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of a category migration run."""

    examined: int
    migrated: int
    failed: int
    mapping: dict[str, str]
    dry_run: bool = False
    failed_event_ids: tuple[str, ...] = field(default=())
