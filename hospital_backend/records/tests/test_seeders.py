from __future__ import annotations

from datetime import date
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from hospital_backend.records.models import ClinicAppointment, Consultation, DailyReport, Patient
from hospital_backend.records.seeders import seed_records
from hospital_backend.reports.queries import load_daily_snapshot

DAY = date(2024, 5, 1)


class SeedRecordsTest(TestCase):
    databases = {"default", "records"}

    def test_seed_creates_one_day_of_records(self):
        stats = seed_records(DAY)

        self.assertEqual(
            stats,
            {"patients": 12, "consultations": 8, "clinic_appointments": 10, "daily_reports": 6},
        )
        self.assertEqual(Patient.objects.using("records").count(), 12)
        self.assertEqual(Consultation.objects.using("records").count(), 8)
        self.assertEqual(ClinicAppointment.objects.using("records").count(), 10)
        self.assertEqual(DailyReport.objects.using("records").count(), 6)

    def test_seed_is_idempotent_per_day(self):
        seed_records(DAY)
        stats = seed_records(DAY)

        self.assertFalse(any(stats.values()))
        self.assertEqual(Patient.objects.using("records").count(), 12)

    def test_seeded_rows_fall_inside_the_report_day(self):
        seed_records(DAY)

        snapshot = load_daily_snapshot(DAY)

        self.assertEqual(len(snapshot.entries), 20)
        self.assertEqual(len(snapshot.appointments), 10)
        self.assertEqual(len(snapshot.daily_reports), 6)
        self.assertFalse(snapshot.has_errors)


class SeedRecordsCommandTest(TestCase):
    databases = {"default", "records"}

    def test_command_seeds_given_date(self):
        out = StringIO()
        call_command("seed_records", "--date", "2024-05-01", stdout=out)

        self.assertIn("Seeding finished.", out.getvalue())
        self.assertEqual(Patient.objects.using("records").count(), 12)

    def test_command_reports_existing_day(self):
        call_command("seed_records", "--date", "2024-05-01", stdout=StringIO())
        out = StringIO()
        call_command("seed_records", "--date", "2024-05-01", stdout=out)

        self.assertIn("nothing seeded", out.getvalue())

    def test_invalid_date(self):
        with self.assertRaises(CommandError):
            call_command("seed_records", "--date", "01/05/2024", stdout=StringIO())
