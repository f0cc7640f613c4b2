"""Record store queries behind the daily report screen.

All filtering and ordering happens in the database:

- patients admitted within the selected day (newest first)
- consultations created within the selected day (newest first)
- clinic appointments created within the selected day (newest first)
- daily reports dated exactly on the selected day, joined with their patient

The three fetches (patients + consultations, appointments, daily reports)
are independent. ``load_daily_snapshot`` runs each of them in isolation: a
failing fetch is logged and recorded on the snapshot while the others still
deliver their data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError
from django.utils import timezone

from hospital_backend.records.models import ClinicAppointment, Consultation, DailyReport, Patient

from .entries import (
    AppointmentRow,
    ConsultationEntry,
    EntryRow,
    PatientEntry,
    ReportEntry,
    entry_row,
    filter_by_specialty,
)
from .exceptions import RecordsFetchError

logger = logging.getLogger(__name__)

RECORDS_DB = "records"

# Last representable instant of a day at millisecond resolution.
END_OF_DAY = time(23, 59, 59, 999000)


def day_window(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Return the inclusive ``[00:00:00.000, 23:59:59.999]`` bounds of ``day``."""
    tz = tz or timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(day, time.min), tz)
    end = timezone.make_aware(datetime.combine(day, END_OF_DAY), tz)
    return start, end


@dataclass(frozen=True)
class DailyReportItem:
    """A daily report with the denormalized name and MRN of its patient."""
    report_id: str
    patient_id: str
    report_date: date
    report_content: str
    created_at: datetime
    patient_name: str
    mrn: str

    @classmethod
    def from_model(cls, report: DailyReport) -> DailyReportItem:
        patient = report.patient
        return cls(
            report_id=str(report.report_id),
            patient_id=report.patient_id,
            report_date=report.report_date,
            report_content=report.report_content or "",
            created_at=report.created_at,
            patient_name=patient.patient_name or "",
            mrn=patient.mrn,
        )


def fetch_patient_entries(day: date) -> list[ReportEntry]:
    """Patients admitted on ``day`` followed by consultations created on ``day``."""
    start, end = day_window(day)
    try:
        patients = list(
            Patient.objects.using(RECORDS_DB)
            .filter(admission_date__range=(start, end))
            .order_by("-admission_date")
        )
        consultations = list(
            Consultation.objects.using(RECORDS_DB)
            .filter(created_at__range=(start, end))
            .order_by("-created_at")
        )
    except DatabaseError as exc:
        raise RecordsFetchError("Failed to fetch patients", source="patients") from exc

    entries: list[ReportEntry] = [PatientEntry.from_model(p) for p in patients]
    entries.extend(ConsultationEntry.from_model(c) for c in consultations)
    return entries


def fetch_appointments(day: date) -> list[ClinicAppointment]:
    start, end = day_window(day)
    try:
        return list(
            ClinicAppointment.objects.using(RECORDS_DB)
            .filter(created_at__range=(start, end))
            .order_by("-created_at")
        )
    except DatabaseError as exc:
        raise RecordsFetchError("Failed to fetch appointments", source="appointments") from exc


def fetch_daily_reports(day: date) -> list[DailyReportItem]:
    try:
        reports = (
            DailyReport.objects.using(RECORDS_DB)
            .select_related("patient")
            .filter(report_date=day)
            .order_by("-created_at")
        )
        return [DailyReportItem.from_model(r) for r in reports]
    except (DatabaseError, ObjectDoesNotExist) as exc:
        raise RecordsFetchError("Failed to fetch daily reports", source="daily_reports") from exc


@dataclass
class DailySnapshot:
    """Everything one request fetched for a (date, specialty) selection.

    A slot left at ``None`` means its fetch failed; an empty list is a
    successful fetch without rows.
    """
    day: date
    specialty: str = ""
    entries: list[ReportEntry] | None = None
    appointments: list[AppointmentRow] | None = None
    daily_reports: list[DailyReportItem] | None = None
    errors: list[RecordsFetchError] = field(default_factory=list)

    @property
    def filters(self) -> dict[str, str]:
        return {"date": self.day.isoformat(), "specialty": self.specialty}

    @property
    def visible_entries(self) -> list[ReportEntry]:
        return filter_by_specialty(self.entries or [], self.specialty)

    @property
    def entry_rows(self) -> list[EntryRow]:
        return [entry_row(entry) for entry in self.visible_entries]

    @property
    def appointment_rows(self) -> list[AppointmentRow]:
        return list(self.appointments or [])

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def load_daily_snapshot(day: date, specialty: str = "", *, include_reports: bool = True) -> DailySnapshot:
    """Run the independent fetches for ``day`` and collect them in a snapshot."""
    snapshot = DailySnapshot(day=day, specialty=specialty or "")

    try:
        snapshot.entries = fetch_patient_entries(day)
    except RecordsFetchError as exc:
        logger.exception("Error fetching patients for %s", day.isoformat())
        snapshot.errors.append(exc)

    try:
        snapshot.appointments = [AppointmentRow.from_model(a) for a in fetch_appointments(day)]
    except RecordsFetchError as exc:
        logger.exception("Error fetching appointments for %s", day.isoformat())
        snapshot.errors.append(exc)

    if include_reports:
        try:
            snapshot.daily_reports = fetch_daily_reports(day)
        except RecordsFetchError as exc:
            logger.exception("Error fetching daily reports for %s", day.isoformat())
            snapshot.errors.append(exc)

    logger.debug(
        "Loaded daily snapshot %s: %s entries, %s appointments, %s errors",
        snapshot.filters,
        len(snapshot.entries or []),
        len(snapshot.appointments or []),
        len(snapshot.errors),
    )
    return snapshot
