"""Reports API URLs.

Prefix: /api/
Routes:
    GET /api/reports/daily/  - Daily report as JSON (JWT, RBAC read roles)
"""

from django.urls import path

from hospital_backend.reports.views import DailyReportAPIView

app_name = 'reports_api'

urlpatterns = [
    path('reports/daily/', DailyReportAPIView.as_view(), name='daily'),
]
