from django.urls import path

from events.handlers import (
    AdminEventDetailView,
    AdminEventListView,
    CategoryMigrationView,
    CategoryReportView,
    EventDetailView,
    EventListView,
    EventsByDateView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/date/<str:day>", EventsByDateView.as_view(), name="events-by-date"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("admin/events", AdminEventListView.as_view(), name="admin-event-list"),
    path("admin/events/<str:event_id>", AdminEventDetailView.as_view(), name="admin-event-detail"),
    path("admin/categories", CategoryReportView.as_view(), name="admin-category-report"),
    path("admin/categories/migrate", CategoryMigrationView.as_view(), name="admin-category-migrate"),
]
