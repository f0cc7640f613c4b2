from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from unittest.mock import patch

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from hospital_backend.records.models import ClinicAppointment, Consultation, DailyReport, Patient
from hospital_backend.reports.entries import ConsultationEntry, PatientEntry
from hospital_backend.reports.exceptions import RecordsFetchError
from hospital_backend.reports.queries import (
    END_OF_DAY,
    day_window,
    fetch_appointments,
    fetch_daily_reports,
    fetch_patient_entries,
    load_daily_snapshot,
)

DAY = date(2024, 5, 1)


def at(hour, minute=0, second=0, microsecond=0, day=DAY):
    return datetime.combine(day, time(hour, minute, second, microsecond), tzinfo=dt_timezone.utc)


class DayWindowTest(SimpleTestCase):
    def test_window_covers_whole_day_to_the_millisecond(self):
        start, end = day_window(DAY, dt_timezone.utc)

        self.assertEqual(start, datetime(2024, 5, 1, 0, 0, 0, 0, tzinfo=dt_timezone.utc))
        self.assertEqual(end, datetime(2024, 5, 1, 23, 59, 59, 999000, tzinfo=dt_timezone.utc))
        self.assertEqual(END_OF_DAY, time(23, 59, 59, 999000))

    def test_window_uses_current_timezone_by_default(self):
        start, end = day_window(DAY)
        self.assertIsNotNone(start.tzinfo)
        self.assertEqual(start.date(), DAY)
        self.assertEqual(end.date(), DAY)


class RecordsQueryTest(TestCase):
    """Record store queries; only the records test DB holds these tables."""

    databases = {"default", "records"}

    def _patient(self, mrn, specialty, admitted, **extra):
        return Patient.objects.using("records").create(
            mrn=mrn,
            patient_name=extra.pop("patient_name", f"Patient {mrn}"),
            age=extra.pop("age", 50),
            gender=extra.pop("gender", "Male"),
            admission_date=admitted,
            specialty=specialty,
            diagnosis=extra.pop("diagnosis", "Observation"),
            **extra,
        )

    def _consultation(self, mrn, specialty, created, **extra):
        return Consultation.objects.using("records").create(
            mrn=mrn,
            patient_name=f"Consult {mrn}",
            age=60,
            gender="Female",
            created_at=created,
            consultation_specialty=specialty,
            requesting_department=extra.pop("requesting_department", "Emergency Medicine"),
            **extra,
        )

    def _appointment(self, name, created, appointment_type=ClinicAppointment.TYPE_REGULAR):
        return ClinicAppointment.objects.using("records").create(
            patient_name=name,
            patient_medical_number=f"MN-{name}",
            clinic_specialty="Cardiology",
            appointment_type=appointment_type,
            created_at=created,
        )

    def test_patients_first_then_consultations_newest_first(self):
        self._patient("P-early", "Cardiology", at(8))
        self._patient("P-late", "Neurology", at(20))
        self._consultation("C-early", "Cardiology", at(9))
        self._consultation("C-late", "Oncology", at(21))

        entries = fetch_patient_entries(DAY)

        self.assertEqual([e.mrn for e in entries], ["P-late", "P-early", "C-late", "C-early"])
        self.assertIsInstance(entries[0], PatientEntry)
        self.assertIsInstance(entries[2], ConsultationEntry)

    def test_day_boundaries_are_inclusive(self):
        self._patient("P-start", "Cardiology", at(0))
        self._patient("P-end", "Cardiology", at(23, 59, 59, 999000))
        self._patient("P-before", "Cardiology", at(0) - timedelta(microseconds=1000))
        self._patient("P-after", "Cardiology", at(0, day=DAY + timedelta(days=1)))

        mrns = {e.mrn for e in fetch_patient_entries(DAY)}

        self.assertEqual(mrns, {"P-start", "P-end"})

    def test_appointments_are_limited_to_day_and_sorted(self):
        self._appointment("morning", at(7))
        self._appointment("evening", at(19), ClinicAppointment.TYPE_URGENT)
        self._appointment("yesterday", at(12, day=DAY - timedelta(days=1)))

        names = [a.patient_name for a in fetch_appointments(DAY)]

        self.assertEqual(names, ["evening", "morning"])

    def test_daily_reports_are_joined_with_their_patient(self):
        patient = self._patient("P-rep", "Cardiology", at(6), patient_name="Layla Khalil")
        DailyReport.objects.using("records").create(
            patient=patient, report_date=DAY, report_content="Stable", created_at=at(12)
        )
        DailyReport.objects.using("records").create(
            patient=patient, report_date=DAY - timedelta(days=1), report_content="Admitted"
        )

        reports = fetch_daily_reports(DAY)

        self.assertEqual(len(reports), 1)
        self.assertEqual(reports[0].patient_name, "Layla Khalil")
        self.assertEqual(reports[0].mrn, "P-rep")
        self.assertEqual(reports[0].report_content, "Stable")

    def test_specialty_filter_applies_to_patients_and_consultations_only(self):
        self._patient("P1", "Cardiology", at(8))
        self._patient("P2", "Cardiology", at(9))
        self._patient("P3", "Neurology", at(10))
        self._consultation("C1", "Cardiology", at(11))
        self._consultation("C2", "Oncology", at(12))
        self._appointment("neuro clinic", at(13))
        self._appointment("ortho clinic", at(14))

        snapshot = load_daily_snapshot(DAY, "Cardiology")

        self.assertEqual(len(snapshot.entries), 5)
        self.assertEqual([e.mrn for e in snapshot.visible_entries], ["P2", "P1", "C1"])
        self.assertEqual(len(snapshot.appointment_rows), 2)
        self.assertFalse(snapshot.has_errors)

    def test_all_specialties_shows_every_entry(self):
        self._patient("P1", "Cardiology", at(8))
        self._consultation("C1", "Oncology", at(9))

        snapshot = load_daily_snapshot(DAY, "")

        self.assertEqual(snapshot.visible_entries, snapshot.entries)
        self.assertEqual(snapshot.filters, {"date": "2024-05-01", "specialty": ""})

    def test_empty_day_gives_empty_lists_not_failures(self):
        snapshot = load_daily_snapshot(DAY)

        self.assertEqual(snapshot.entries, [])
        self.assertEqual(snapshot.appointments, [])
        self.assertEqual(snapshot.daily_reports, [])
        self.assertEqual(snapshot.errors, [])

    def test_failing_fetch_does_not_hide_other_sections(self):
        self._patient("P1", "Cardiology", at(8))
        self._appointment("clinic", at(9))

        with patch(
            "hospital_backend.reports.queries.fetch_appointments",
            side_effect=RecordsFetchError("Failed to fetch appointments", source="appointments"),
        ):
            snapshot = load_daily_snapshot(DAY)

        self.assertIsNone(snapshot.appointments)
        self.assertEqual([e.mrn for e in snapshot.entries], ["P1"])
        self.assertEqual(snapshot.daily_reports, [])
        self.assertEqual([e.source for e in snapshot.errors], ["appointments"])
        self.assertEqual(snapshot.appointment_rows, [])

    def test_database_error_becomes_records_fetch_error(self):
        with patch.object(Patient.objects, "using", side_effect=DatabaseError("connection lost")):
            with self.assertRaises(RecordsFetchError) as ctx:
                fetch_patient_entries(DAY)

        self.assertEqual(ctx.exception.message, "Failed to fetch patients")
        self.assertEqual(ctx.exception.to_dict(), {"detail": "Failed to fetch patients", "source": "patients"})

    def test_reports_can_be_skipped(self):
        snapshot = load_daily_snapshot(DAY, include_reports=False)
        self.assertIsNone(snapshot.daily_reports)
        self.assertFalse(snapshot.has_errors)
