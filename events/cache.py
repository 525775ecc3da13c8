"""Cache keys for public event responses.

List responses are keyed under a version number so one bump invalidates
every filtered variant at once.
"""

import hashlib

from django.conf import settings
from django.core.cache import cache

LIST_VERSION_KEY = "events:list:version"


def detail_key(event_id) -> str:
    return f"events:{event_id}"


def list_key(params) -> str:
    version = cache.get(LIST_VERSION_KEY, 1)
    query = "&".join(f"{key}={params.get(key)}" for key in sorted(params))
    digest = hashlib.sha1(query.encode()).hexdigest()[:16]
    return f"events:list:v{version}:{digest}"


def fetch(key: str) -> dict | None:
    return cache.get(key)


def store(key: str, body: dict) -> None:
    cache.set(key, body, timeout=settings.CACHE_TTL_SECONDS)


def invalidate_event(event_id) -> None:
    """Drop the cached detail of one event and every cached list."""
    cache.delete(detail_key(event_id))
    invalidate_lists()


def invalidate_lists() -> None:
    try:
        cache.incr(LIST_VERSION_KEY)
    except ValueError:
        cache.set(LIST_VERSION_KEY, 2, timeout=None)
