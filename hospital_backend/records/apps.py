"""
Records App Configuration
"""

from django.apps import AppConfig


class RecordsConfig(AppConfig):
    """Hospital record store (patients, consultations, appointments, daily reports)."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hospital_backend.records'
    verbose_name = 'Records (Hospital record store)'
