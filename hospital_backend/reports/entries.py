"""Report entries: the merged patient/consultation list and its display rows.

The "patients" section of the daily report mixes admitted patients and
consultations. Each record is wrapped in a tagged variant carrying its own
complete field set:

- ``PatientEntry`` (``kind == "patient"``)
- ``ConsultationEntry`` (``kind == "consultation"``)

``entry_row`` is the single accessor that turns either variant into the
five display columns used by both the HTML table and the PDF export.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Iterable, Union

from hospital_backend.records.models import ClinicAppointment, Consultation, Patient

KIND_PATIENT = "patient"
KIND_CONSULTATION = "consultation"


@dataclass(frozen=True)
class PatientEntry:
    mrn: str
    patient_name: str
    age: int | None
    gender: str
    admission_date: datetime
    specialty: str
    patient_status: str
    diagnosis: str
    updated_at: datetime | None
    kind: str = field(default=KIND_PATIENT, init=False)

    @classmethod
    def from_model(cls, patient: Patient) -> PatientEntry:
        return cls(
            mrn=patient.mrn,
            patient_name=patient.patient_name or "",
            age=patient.age,
            gender=patient.gender or "",
            admission_date=patient.admission_date,
            specialty=patient.specialty or "",
            patient_status=patient.patient_status or "",
            diagnosis=patient.diagnosis or "",
            updated_at=patient.updated_at,
        )


@dataclass(frozen=True)
class ConsultationEntry:
    mrn: str
    patient_name: str
    age: int | None
    gender: str
    created_at: datetime
    consultation_specialty: str
    status: str
    requesting_department: str
    updated_at: datetime | None
    kind: str = field(default=KIND_CONSULTATION, init=False)

    @classmethod
    def from_model(cls, consultation: Consultation) -> ConsultationEntry:
        return cls(
            mrn=consultation.mrn,
            patient_name=consultation.patient_name or "",
            age=consultation.age,
            gender=consultation.gender or "",
            created_at=consultation.created_at,
            consultation_specialty=consultation.consultation_specialty or "",
            status=consultation.status or "",
            requesting_department=consultation.requesting_department or "",
            updated_at=consultation.updated_at,
        )


ReportEntry = Union[PatientEntry, ConsultationEntry]


def entry_specialty(entry: ReportEntry) -> str:
    if isinstance(entry, PatientEntry):
        return entry.specialty
    return entry.consultation_specialty


def filter_by_specialty(entries: Iterable[ReportEntry], specialty: str) -> list[ReportEntry]:
    """Return the visible entries for ``specialty``.

    An empty specialty means "all specialties" and keeps every entry.
    Otherwise the match is exact and case-sensitive.
    """
    if not specialty:
        return list(entries)
    return [entry for entry in entries if entry_specialty(entry) == specialty]


def age_gender(age: int | None, gender: str | None) -> str:
    return f"{'' if age is None else age} / {gender or ''}"


@dataclass(frozen=True)
class EntryRow:
    """Display row shared by the HTML table and the PDF table."""
    kind: str
    mrn: str
    patient_name: str
    age_gender: str
    specialty: str
    diagnosis_or_department: str

    def cells(self) -> list[str]:
        return [
            self.mrn,
            self.patient_name,
            self.age_gender,
            self.specialty,
            self.diagnosis_or_department,
        ]

    def to_dict(self) -> dict:
        return asdict(self)


def entry_row(entry: ReportEntry) -> EntryRow:
    """Map a patient or consultation entry to its display row.

    The last column shows the patient's diagnosis, or the requesting
    department for a consultation.
    """
    if isinstance(entry, PatientEntry):
        detail = entry.diagnosis
    else:
        detail = entry.requesting_department
    return EntryRow(
        kind=entry.kind,
        mrn=entry.mrn,
        patient_name=entry.patient_name,
        age_gender=age_gender(entry.age, entry.gender),
        specialty=entry_specialty(entry),
        diagnosis_or_department=detail,
    )


@dataclass(frozen=True)
class AppointmentRow:
    appointment_id: str
    patient_name: str
    medical_number: str
    specialty: str
    appointment_type: str
    notes: str

    @classmethod
    def from_model(cls, appointment: ClinicAppointment) -> AppointmentRow:
        return cls(
            appointment_id=str(appointment.appointment_id),
            patient_name=appointment.patient_name or "",
            medical_number=appointment.patient_medical_number or "",
            specialty=appointment.clinic_specialty or "",
            appointment_type=appointment.appointment_type or "",
            notes=appointment.notes or "",
        )

    @property
    def is_urgent(self) -> bool:
        return self.appointment_type == ClinicAppointment.TYPE_URGENT

    @property
    def badge_class(self) -> str:
        return "badge-urgent" if self.is_urgent else "badge-regular"

    def cells(self) -> list[str]:
        return [
            self.patient_name,
            self.medical_number,
            self.specialty,
            self.appointment_type,
            self.notes,
        ]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["is_urgent"] = self.is_urgent
        return data
