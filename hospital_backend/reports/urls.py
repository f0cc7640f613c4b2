"""Reports URLs - Daily Report Management screen.

Prefix: /reports/
Routes:
    GET /reports/daily/      - HTML screen (staff only)
    GET /reports/daily/pdf/  - PDF download (staff only)
"""

from django.urls import path

from hospital_backend.reports.views import DailyReportPDFView, DailyReportView

app_name = 'reports'

urlpatterns = [
    path('daily/', DailyReportView.as_view(), name='daily'),
    path('daily/pdf/', DailyReportPDFView.as_view(), name='daily_pdf'),
]
