from django.apps import AppConfig


class ReportsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hospital_backend.reports'
    verbose_name = 'Reports (Daily report management)'
