from events.domain.models import CategoryReport, Event, EventFilters, MigrationResult
from events.domain.value_objects import Capacity, EventId, Money

__all__ = [
    "Event",
    "EventFilters",
    "CategoryReport",
    "MigrationResult",
    "EventId",
    "Money",
    "Capacity",
]
