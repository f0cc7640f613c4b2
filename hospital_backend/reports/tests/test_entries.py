from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from hospital_backend.reports.entries import (
    KIND_CONSULTATION,
    KIND_PATIENT,
    AppointmentRow,
    ConsultationEntry,
    PatientEntry,
    age_gender,
    entry_row,
    entry_specialty,
    filter_by_specialty,
)

NOW = datetime(2024, 5, 1, 10, 0, tzinfo=dt_timezone.utc)


def make_patient(mrn, specialty, diagnosis="Pneumonia", **extra) -> PatientEntry:
    values = {
        "mrn": mrn,
        "patient_name": f"Patient {mrn}",
        "age": 40,
        "gender": "Male",
        "admission_date": NOW,
        "specialty": specialty,
        "patient_status": "Active",
        "diagnosis": diagnosis,
        "updated_at": NOW,
    }
    values.update(extra)
    return PatientEntry(**values)


def make_consultation(mrn, specialty, department="Emergency Medicine", **extra) -> ConsultationEntry:
    values = {
        "mrn": mrn,
        "patient_name": f"Consult {mrn}",
        "age": 55,
        "gender": "Female",
        "created_at": NOW,
        "consultation_specialty": specialty,
        "status": "Pending",
        "requesting_department": department,
        "updated_at": NOW,
    }
    values.update(extra)
    return ConsultationEntry(**values)


class EntryRowTest(SimpleTestCase):
    def test_patient_row_shows_diagnosis(self):
        row = entry_row(make_patient("P1", "Cardiology", diagnosis="Chest pain"))

        self.assertEqual(row.kind, KIND_PATIENT)
        self.assertEqual(row.cells(), ["P1", "Patient P1", "40 / Male", "Cardiology", "Chest pain"])

    def test_consultation_row_shows_requesting_department(self):
        row = entry_row(make_consultation("C1", "Neurology", department="Internal Medicine"))

        self.assertEqual(row.kind, KIND_CONSULTATION)
        self.assertEqual(row.specialty, "Neurology")
        self.assertEqual(row.diagnosis_or_department, "Internal Medicine")

    def test_patient_diagnosis_wins_even_when_empty(self):
        row = entry_row(make_patient("P2", "Cardiology", diagnosis=""))
        self.assertEqual(row.diagnosis_or_department, "")

    def test_age_gender_with_missing_values(self):
        self.assertEqual(age_gender(None, None), " / ")
        self.assertEqual(age_gender(0, "Female"), "0 / Female")

    def test_to_dict_contains_all_columns(self):
        data = entry_row(make_patient("P3", "Cardiology")).to_dict()
        self.assertEqual(
            set(data),
            {"kind", "mrn", "patient_name", "age_gender", "specialty", "diagnosis_or_department"},
        )


class FilterBySpecialtyTest(SimpleTestCase):
    def setUp(self):
        self.entries = [
            make_patient("P1", "Cardiology"),
            make_patient("P2", "Neurology"),
            make_patient("P3", "Cardiology"),
            make_consultation("C1", "Cardiology"),
            make_consultation("C2", "Oncology"),
        ]

    def test_empty_specialty_keeps_everything_in_order(self):
        self.assertEqual(filter_by_specialty(self.entries, ""), self.entries)

    def test_filter_is_exact_subset_in_order(self):
        visible = filter_by_specialty(self.entries, "Cardiology")

        self.assertEqual([e.mrn for e in visible], ["P1", "P3", "C1"])
        for entry in visible:
            self.assertIn(entry, self.entries)
            self.assertEqual(entry_specialty(entry), "Cardiology")

    def test_filter_is_case_sensitive(self):
        self.assertEqual(filter_by_specialty(self.entries, "cardiology"), [])

    def test_unknown_specialty_gives_empty_list(self):
        self.assertEqual(filter_by_specialty(self.entries, "Dermatology"), [])


class AppointmentRowTest(SimpleTestCase):
    def _row(self, appointment_type):
        return AppointmentRow(
            appointment_id="a1",
            patient_name="Sara Haddad",
            medical_number="MN1",
            specialty="Cardiology",
            appointment_type=appointment_type,
            notes="",
        )

    def test_urgent_badge(self):
        row = self._row("Urgent")
        self.assertTrue(row.is_urgent)
        self.assertEqual(row.badge_class, "badge-urgent")

    def test_everything_else_is_regular(self):
        for value in ("Regular", "urgent", ""):
            row = self._row(value)
            self.assertFalse(row.is_urgent)
            self.assertEqual(row.badge_class, "badge-regular")

    def test_to_dict_includes_urgency(self):
        self.assertTrue(self._row("Urgent").to_dict()["is_urgent"])
