"""Hospital record store models.

Important:
- All models live on the ``records`` database alias (see ``db_router``).
- The daily report screen only reads these tables; rows are written by the
    admission, consultation and clinic workflows (or by ``seed_records``).
"""

import uuid

from django.db import models
from django.utils import timezone


class Patient(models.Model):
    """Admitted patient, identified by the medical record number."""

    mrn = models.CharField('MRN', max_length=32, primary_key=True)
    patient_name = models.CharField(max_length=200)
    age = models.PositiveSmallIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=20, blank=True, default='')
    admission_date = models.DateTimeField(default=timezone.now, db_index=True)
    specialty = models.CharField(max_length=100, db_index=True)
    patient_status = models.CharField(max_length=50, blank=True, default='Active')
    diagnosis = models.TextField(blank=True, default='')
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'patients'
        ordering = ['-admission_date']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self) -> str:
        return f"{self.patient_name} ({self.mrn})"


class Consultation(models.Model):
    """Consultation requested by a department for a patient."""

    mrn = models.CharField('MRN', max_length=32, db_index=True)
    patient_name = models.CharField(max_length=200)
    age = models.PositiveSmallIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=20, blank=True, default='')
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    consultation_specialty = models.CharField(max_length=100, db_index=True)
    status = models.CharField(max_length=50, blank=True, default='Pending')
    requesting_department = models.CharField(max_length=100, blank=True, default='')
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'consultations'
        ordering = ['-created_at']
        verbose_name = 'Consultation'
        verbose_name_plural = 'Consultations'

    def __str__(self) -> str:
        return f"{self.patient_name} ({self.mrn}) - {self.consultation_specialty}"


class ClinicAppointment(models.Model):
    """Outpatient clinic appointment."""

    TYPE_URGENT = 'Urgent'
    TYPE_REGULAR = 'Regular'

    TYPE_CHOICES = [
        (TYPE_URGENT, 'Urgent'),
        (TYPE_REGULAR, 'Regular'),
    ]

    appointment_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_name = models.CharField(max_length=200)
    patient_medical_number = models.CharField(max_length=32, db_index=True)
    clinic_specialty = models.CharField(max_length=100)
    appointment_type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_REGULAR)
    notes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'clinic_appointments'
        ordering = ['-created_at']
        verbose_name = 'Clinic appointment'
        verbose_name_plural = 'Clinic appointments'

    def __str__(self) -> str:
        return f"{self.patient_name} - {self.clinic_specialty} ({self.appointment_type})"

    @property
    def is_urgent(self) -> bool:
        return self.appointment_type == self.TYPE_URGENT


class DailyReport(models.Model):
    """Free-text daily report written for an admitted patient."""

    report_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(
        Patient,
        on_delete=models.CASCADE,
        db_column='patient_id',
        related_name='daily_reports',
    )
    report_date = models.DateField(db_index=True)
    report_content = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'daily_reports'
        ordering = ['-created_at']
        verbose_name = 'Daily report'
        verbose_name_plural = 'Daily reports'

    def __str__(self) -> str:
        return f"{self.report_date} - {self.patient_id}"
