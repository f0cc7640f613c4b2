"""Serializers for the daily report API.

The payload mirrors the HTML screen: display-ready rows for the visible
patients/consultations, all appointments of the day, and the daily reports.
A section whose fetch failed is ``null`` (an empty list means "no rows").
"""

from rest_framework import serializers


class EntryRowSerializer(serializers.Serializer):
    kind = serializers.CharField()
    mrn = serializers.CharField()
    patient_name = serializers.CharField()
    age_gender = serializers.CharField()
    specialty = serializers.CharField()
    diagnosis_or_department = serializers.CharField()


class AppointmentRowSerializer(serializers.Serializer):
    appointment_id = serializers.CharField()
    patient_name = serializers.CharField()
    medical_number = serializers.CharField()
    specialty = serializers.CharField()
    appointment_type = serializers.CharField()
    notes = serializers.CharField()
    is_urgent = serializers.BooleanField()


class DailyReportItemSerializer(serializers.Serializer):
    report_id = serializers.CharField()
    patient_id = serializers.CharField()
    report_date = serializers.DateField()
    report_content = serializers.CharField()
    created_at = serializers.DateTimeField()
    patient_name = serializers.CharField()
    mrn = serializers.CharField()


class DailySnapshotSerializer(serializers.Serializer):
    """Read-only representation of a ``DailySnapshot``."""

    filters = serializers.SerializerMethodField()
    entries = serializers.SerializerMethodField()
    appointments = serializers.SerializerMethodField()
    daily_reports = serializers.SerializerMethodField()
    fetch_errors = serializers.SerializerMethodField()
    counts = serializers.SerializerMethodField()

    def get_filters(self, snapshot):
        return snapshot.filters

    def get_entries(self, snapshot):
        if snapshot.entries is None:
            return None
        return EntryRowSerializer(snapshot.entry_rows, many=True).data

    def get_appointments(self, snapshot):
        if snapshot.appointments is None:
            return None
        return AppointmentRowSerializer(snapshot.appointment_rows, many=True).data

    def get_daily_reports(self, snapshot):
        if snapshot.daily_reports is None:
            return None
        return DailyReportItemSerializer(snapshot.daily_reports, many=True).data

    def get_fetch_errors(self, snapshot):
        return [error.to_dict() for error in snapshot.errors]

    def get_counts(self, snapshot):
        return {
            'fetched': len(snapshot.entries or []),
            'visible': len(snapshot.visible_entries),
            'appointments': len(snapshot.appointments or []),
            'daily_reports': len(snapshot.daily_reports or []),
        }
