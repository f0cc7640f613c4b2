import random
from datetime import date, datetime, time, timedelta

from django.db import transaction
from django.utils import timezone

from .constants import SPECIALTIES
from .models import ClinicAppointment, Consultation, DailyReport, Patient

RANDOM_SEED = 42

DIAGNOSES = [
    "Acute myocardial infarction",
    "Community-acquired pneumonia",
    "Ischemic stroke",
    "Diabetic ketoacidosis",
    "Acute kidney injury",
    "Upper GI bleeding",
    "Heart failure exacerbation",
    "Cellulitis",
]

DEPARTMENTS = ["Emergency Medicine", "Internal Medicine", "General Surgery", "Critical Care"]


def seed_records(day: date | None = None) -> dict:
    """
    Seed demo records for one day, BUT:
    - never deletes existing data
    - only creates rows if nobody was admitted on that day yet

    This protects real data in case the same database is used.
    """
    random.seed(RANDOM_SEED)
    day = day or timezone.localdate()
    stats: dict[str, int] = {
        "patients": 0,
        "consultations": 0,
        "clinic_appointments": 0,
        "daily_reports": 0,
    }

    tz = timezone.get_current_timezone()
    day_start = timezone.make_aware(datetime.combine(day, time.min), tz)
    day_end = day_start + timedelta(days=1)
    if Patient.objects.using("records").filter(admission_date__gte=day_start, admission_date__lt=day_end).exists():
        return stats

    with transaction.atomic(using="records"):
        patients = _seed_patients(day_start)
        stats["patients"] = len(patients)
        stats["consultations"] = len(_seed_consultations(day_start))
        stats["clinic_appointments"] = len(_seed_appointments(day_start))
        stats["daily_reports"] = len(_seed_daily_reports(day, day_start, patients))

    return stats


def _name() -> str:
    first = random.choice(["Ali", "Omar", "Sara", "Layla", "Mariam", "Yusuf", "Noura", "Karim"])
    last = random.choice(["Ahmad", "Salim", "Haddad", "Khalil", "Rahman", "Hamidi"])
    return f"{first} {last}"


def _at(day_start: datetime) -> datetime:
    return day_start + timedelta(minutes=random.randint(0, 24 * 60 - 1))


def _seed_patients(day_start: datetime) -> list[Patient]:
    patients: list[Patient] = []
    for i in range(12):
        admitted = _at(day_start)
        patients.append(
            Patient.objects.using("records").create(
                mrn=f"MRN{day_start:%y%m%d}{i:03d}",
                patient_name=_name(),
                age=random.randint(18, 90),
                gender=random.choice(["Male", "Female"]),
                admission_date=admitted,
                specialty=random.choice(SPECIALTIES),
                patient_status="Active",
                diagnosis=random.choice(DIAGNOSES),
                updated_at=admitted,
            )
        )
    return patients


def _seed_consultations(day_start: datetime) -> list[Consultation]:
    consultations: list[Consultation] = []
    for i in range(8):
        created = _at(day_start)
        consultations.append(
            Consultation.objects.using("records").create(
                mrn=f"MRN{day_start:%y%m%d}C{i:02d}",
                patient_name=_name(),
                age=random.randint(18, 90),
                gender=random.choice(["Male", "Female"]),
                created_at=created,
                consultation_specialty=random.choice(SPECIALTIES),
                status=random.choice(["Pending", "In Progress", "Completed"]),
                requesting_department=random.choice(DEPARTMENTS),
                updated_at=created,
            )
        )
    return consultations


def _seed_appointments(day_start: datetime) -> list[ClinicAppointment]:
    appointments: list[ClinicAppointment] = []
    for i in range(10):
        appointments.append(
            ClinicAppointment.objects.using("records").create(
                patient_name=_name(),
                patient_medical_number=f"MN{day_start:%y%m%d}{i:03d}",
                clinic_specialty=random.choice(SPECIALTIES),
                appointment_type=random.choice([ClinicAppointment.TYPE_URGENT, ClinicAppointment.TYPE_REGULAR]),
                notes=random.choice(["", "Follow-up", "New referral", "Review labs"]),
                created_at=_at(day_start),
            )
        )
    return appointments


def _seed_daily_reports(day: date, day_start: datetime, patients: list[Patient]) -> list[DailyReport]:
    reports: list[DailyReport] = []
    for patient in patients[: len(patients) // 2]:
        reports.append(
            DailyReport.objects.using("records").create(
                patient=patient,
                report_date=day,
                report_content=f"Stable. Continue management of {patient.diagnosis.lower()}.",
                created_at=_at(day_start),
            )
        )
    return reports
