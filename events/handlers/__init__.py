from events.handlers.views import (
    AdminEventDetailView,
    AdminEventListView,
    CategoryMigrationView,
    CategoryReportView,
    EventDetailView,
    EventListView,
    EventsByDateView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventsByDateView",
    "AdminEventListView",
    "AdminEventDetailView",
    "CategoryReportView",
    "CategoryMigrationView",
]
