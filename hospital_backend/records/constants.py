"""Clinical specialties offered by the report filters."""

from django.conf import settings

SPECIALTIES = [
    "Cardiology",
    "Cardiothoracic Surgery",
    "Critical Care",
    "Dermatology",
    "Emergency Medicine",
    "Endocrinology",
    "ENT",
    "Gastroenterology",
    "General Surgery",
    "Hematology",
    "Internal Medicine",
    "Nephrology",
    "Neurology",
    "Neurosurgery",
    "Obstetrics and Gynecology",
    "Oncology",
    "Ophthalmology",
    "Orthopedics",
    "Pediatrics",
    "Psychiatry",
    "Pulmonology",
    "Rheumatology",
    "Urology",
    "Vascular Surgery",
]


def specialty_choices() -> list[str]:
    """Specialties for the selector; ``DAILY_REPORT_SPECIALTIES`` overrides the default list."""
    configured = getattr(settings, "DAILY_REPORT_SPECIALTIES", None)
    return list(configured) if configured else list(SPECIALTIES)
