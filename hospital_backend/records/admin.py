"""hospital_backend.records.admin

Read-only admin classes for the hospital record store.

The daily report screen never writes these tables, and the admin follows the
same rule: records are browsable but cannot be added, changed or deleted here.
"""

from __future__ import annotations

from django.contrib import admin
from django.utils.html import format_html

from hospital_backend.core.admin import hospital_admin_site

from .models import ClinicAppointment, Consultation, DailyReport, Patient


class ReadOnlyRecordAdmin(admin.ModelAdmin):
    """Base admin for record store tables (no add/change/delete)."""

    list_per_page = 50

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Patient, site=hospital_admin_site)
class PatientAdmin(ReadOnlyRecordAdmin):

    list_display = ("mrn", "patient_name", "age", "gender", "specialty", "patient_status", "admission_date")
    search_fields = ("mrn", "patient_name", "diagnosis")
    list_filter = ("specialty", "patient_status")
    date_hierarchy = "admission_date"
    ordering = ("-admission_date",)


@admin.register(Consultation, site=hospital_admin_site)
class ConsultationAdmin(ReadOnlyRecordAdmin):

    list_display = ("mrn", "patient_name", "consultation_specialty", "requesting_department", "status", "created_at")
    search_fields = ("mrn", "patient_name")
    list_filter = ("consultation_specialty", "status")
    date_hierarchy = "created_at"
    ordering = ("-created_at",)


@admin.register(ClinicAppointment, site=hospital_admin_site)
class ClinicAppointmentAdmin(ReadOnlyRecordAdmin):

    list_display = ("patient_name", "patient_medical_number", "clinic_specialty", "type_badge", "created_at")
    search_fields = ("patient_name", "patient_medical_number")
    list_filter = ("clinic_specialty", "appointment_type")
    date_hierarchy = "created_at"
    ordering = ("-created_at",)

    def type_badge(self, obj):
        color = "#991b1b" if obj.is_urgent else "#166534"
        return format_html('<span style="color: {}; font-weight: 600;">{}</span>', color, obj.appointment_type)
    type_badge.short_description = "Type"


@admin.register(DailyReport, site=hospital_admin_site)
class DailyReportAdmin(ReadOnlyRecordAdmin):

    list_display = ("report_date", "patient", "created_at")
    search_fields = ("patient__mrn", "patient__patient_name", "report_content")
    date_hierarchy = "report_date"
    ordering = ("-created_at",)
    list_select_related = ("patient",)
