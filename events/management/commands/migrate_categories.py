import typing as t

from django.core.management.base import BaseCommand, CommandError

from events.categories import is_base_category
from events.services.category_migration import DEFAULT_BATCH_SIZE, CategoryMigrationService
from events.stores.django_store import DjangoEventStore


class Command(BaseCommand):
    """Remap events whose category is not one of the base categories."""

    help = "Remap legacy event categories onto the base categories."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--dry-run", action="store_true", help="Report the plan without writing.")
        parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH_SIZE)
        parser.add_argument(
            "--map",
            action="append",
            default=[],
            metavar="OLD=NEW",
            help="Override the mapping for one legacy category. Repeatable.",
        )

    def handle(self, *args: t.Any, **options: t.Any) -> None:
        overrides = {}
        for item in options["map"]:
            old, sep, new = item.partition("=")
            if not sep or not old or not is_base_category(new):
                raise CommandError(f"Invalid mapping {item!r}; expected OLD=NEW with NEW a base category")
            overrides[old] = new

        if options["batch_size"] < 1:
            raise CommandError("--batch-size must be at least 1")

        service = CategoryMigrationService(DjangoEventStore())
        report = service.analyze(overrides)
        for category, count in sorted(report.counts.items()):
            marker = "" if is_base_category(category) else f" -> {report.suggested_mapping[category]}"
            self.stdout.write(f"{category}: {count}{marker}")

        result = service.migrate(overrides, batch_size=options["batch_size"], dry_run=options["dry_run"])
        if result.dry_run:
            self.stdout.write(f"Dry run: {result.examined} events would be migrated")
            return
        self.stdout.write(
            self.style.SUCCESS(f"Migrated {result.migrated} of {result.examined} events")
        )
        if result.failed:
            self.stdout.write(self.style.ERROR(f"{result.failed} events failed: {', '.join(result.failed_event_ids)}"))
