"""Remaps events whose category is outside BASE_CATEGORIES.

Events are processed in fixed-size batches. A failed update is counted and
logged; it never stops the run and nothing is rolled back or retried.
"""

import logging
from collections.abc import Mapping

from django.db import DatabaseError

from common.errors import DomainError
from events.categories import is_base_category, resolve_category
from events.domain import CategoryReport, MigrationResult
from events.domain.errors import InvalidCategoryError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10


class CategoryMigrationService:
    """Analyses and migrates event categories."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def analyze(self, overrides: Mapping[str, str] | None = None) -> CategoryReport:
        counts = self._store.category_counts()
        invalid = tuple(c for c in counts if not is_base_category(c))
        return CategoryReport(
            counts=counts,
            invalid_categories=invalid,
            suggested_mapping={c: resolve_category(c, overrides) for c in invalid},
        )

    def migrate(
        self,
        overrides: Mapping[str, str] | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        dry_run: bool = False,
    ) -> MigrationResult:
        """Rewrite every non-base category to its resolved base category."""
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        report = self.analyze(overrides)
        mapping = report.suggested_mapping
        for target in mapping.values():
            if not is_base_category(target):
                raise InvalidCategoryError(target)
        events = self._store.list_events_in_categories(mapping) if mapping else []

        if dry_run or not events:
            logger.info("Category migration: %d events to migrate (dry_run=%s)", len(events), dry_run)
            return MigrationResult(
                examined=len(events), migrated=0, failed=0, mapping=mapping, dry_run=dry_run
            )

        migrated = 0
        failed_ids: list[str] = []
        for start in range(0, len(events), batch_size):
            batch = events[start : start + batch_size]
            for event in batch:
                try:
                    updated = self._store.update_event(event.id, {"category": mapping[event.category]})
                except (DomainError, DatabaseError):
                    logger.exception("Failed to migrate category of event %s", event.id)
                    failed_ids.append(str(event.id))
                    continue
                if updated is None:
                    logger.warning("Event %s disappeared during category migration", event.id)
                    failed_ids.append(str(event.id))
                else:
                    migrated += 1
            logger.info(
                "Category migration batch %d done: %d migrated, %d failed so far",
                start // batch_size + 1,
                migrated,
                len(failed_ids),
            )

        return MigrationResult(
            examined=len(events),
            migrated=migrated,
            failed=len(failed_ids),
            mapping=mapping,
            failed_event_ids=tuple(failed_ids),
        )
