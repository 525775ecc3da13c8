"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import Role, User
from events.models import Event

PASSWORD = "secret123"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    counter = iter(range(1, 10_000))

    def _make(role: str = Role.USER, **overrides) -> User:
        n = next(counter)
        fields = {"email": f"{role}{n}@example.com", "name": f"{role.title()} {n}", "role": role}
        fields.update(overrides)
        return User.objects.create_user(password=PASSWORD, **fields)

    return _make


@pytest.fixture
def attendee(make_user) -> User:
    return make_user(Role.USER)


@pytest.fixture
def organizer(make_user) -> User:
    return make_user(Role.ORGANIZER)


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(Role.ADMIN)


@pytest.fixture
def client_for():
    """Return an APIClient authenticated as the given user."""

    def _client(user: User) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client


@pytest.fixture
def make_event(organizer):
    """Create events starting in one hour unless told otherwise."""

    def _make(**overrides) -> Event:
        start = overrides.pop("start_date_time", timezone.now() + timedelta(hours=1))
        fields = {
            "title": "Jazz Night",
            "description": "Live jazz on the rooftop",
            "category": "Music",
            "venue": "The Loft",
            "address": "1 Main St",
            "start_date_time": start,
            "end_date_time": start + timedelta(hours=3),
            "tickets_available": 10,
            "price": 0,
            "organizer": organizer,
        }
        fields.update(overrides)
        return Event.objects.create(**fields)

    return _make
