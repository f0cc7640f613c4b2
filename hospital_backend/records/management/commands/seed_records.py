"""
Seed command - creates reproducible demo records for one day.

Usage:
    python manage.py seed_records                    # today
    python manage.py seed_records --date 2024-05-01

Existing rows are never deleted; a day that already has admissions is skipped.
"""

from datetime import date

from django.core.management.base import BaseCommand, CommandError

from hospital_backend.records.seeders import seed_records


class Command(BaseCommand):
    help = "Seed the records database with demo patients, consultations, appointments and daily reports"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            dest="day",
            help="Day to seed (YYYY-MM-DD). Defaults to today.",
        )

    def handle(self, *args, **options):
        raw = options.get("day")
        day = None
        if raw:
            try:
                day = date.fromisoformat(raw)
            except ValueError as exc:
                raise CommandError(f"Invalid --date value: {raw!r}") from exc

        stats = seed_records(day)

        if not any(stats.values()):
            self.stdout.write(self.style.WARNING("Records already present for that day, nothing seeded."))
            return

        for name, count in stats.items():
            self.stdout.write(f"  {name:<22} {count:>5}")
        self.stdout.write(self.style.SUCCESS("Seeding finished."))
