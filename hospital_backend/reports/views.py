"""Daily Report Management views.

Contains:
- DailyReportView: staff-only HTML screen (date + specialty filters, two tables)
- DailyReportPDFView: staff-only PDF download of the same data
- DailyReportAPIView: JSON API for asynchronous clients (JWT / RBAC)

Every request loads its own snapshot for the filters it carries, so a
response always belongs to the selection that produced it.
"""

from __future__ import annotations

import io
import logging
import re
from datetime import date
from urllib.parse import urlencode

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import FileResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View

from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_backend.core.utils import log_report_action
from hospital_backend.records.constants import specialty_choices

from .exceptions import ReportExportError
from .pdf import LABEL_GENERATING, DailyReportExporter
from .permissions import DailyReportPermission
from .queries import DailySnapshot, load_daily_snapshot
from .serializers import DailySnapshotSerializer

logger = logging.getLogger(__name__)

# The screen appends ``download_token`` to the export URL and keeps the
# "Generating PDF..." label until this cookie comes back with the same value.
DOWNLOAD_TOKEN_PARAM = "download_token"
DOWNLOAD_TOKEN_COOKIE = "daily_report_download"
DOWNLOAD_TOKEN_MAX_AGE = 60

_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def _download_token(params) -> str:
    token = params.get(DOWNLOAD_TOKEN_PARAM) or ""
    return token if _TOKEN_RE.match(token) else ""


def _parse_date(value: str | None, *, default: date) -> date:
    if not value:
        return default
    try:
        return date.fromisoformat(value)
    except ValueError:
        return default


def _parse_filters(params) -> tuple[date, str]:
    """Read ``date`` and ``specialty`` from a query dict.

    The date defaults to today (local time); an empty specialty means all.
    """
    day = _parse_date(params.get("date"), default=timezone.localdate())
    specialty = params.get("specialty") or ""
    return day, specialty


def _screen_url(snapshot: DailySnapshot) -> str:
    return f"{reverse('reports:daily')}?{urlencode(snapshot.filters)}"


def _notify_errors(request, snapshot: DailySnapshot) -> None:
    for error in snapshot.errors:
        messages.error(request, error.message)


class DailyReportView(View):
    """Staff-only Daily Report Management screen.

    GET /reports/daily/?date=YYYY-MM-DD&specialty=<name>
    """

    template_name = "reports/daily_report.html"

    @method_decorator(staff_member_required)
    def get(self, request):
        day, specialty = _parse_filters(request.GET)
        snapshot = load_daily_snapshot(day, specialty)
        _notify_errors(request, snapshot)

        log_report_action(request.user, "daily_report_view", meta=snapshot.filters)

        exporter = DailyReportExporter()
        context = {
            "title": "Daily Report Management",
            "selected_date": day.isoformat(),
            "selected_specialty": specialty,
            "specialties": specialty_choices(),
            "entry_rows": snapshot.entry_rows,
            "patients_failed": snapshot.entries is None,
            "appointments": snapshot.appointment_rows,
            "appointments_failed": snapshot.appointments is None,
            "export_url": f"{reverse('reports:daily_pdf')}?{urlencode(snapshot.filters)}",
            "export_filename": exporter.filename(snapshot),
            "export_label": exporter.label,
            "export_generating_label": LABEL_GENERATING,
            "download_token_param": DOWNLOAD_TOKEN_PARAM,
            "download_token_cookie": DOWNLOAD_TOKEN_COOKIE,
        }
        return render(request, self.template_name, context)


class DailyReportPDFView(View):
    """Staff-only PDF download.

    GET /reports/daily/pdf/?date=YYYY-MM-DD&specialty=<name>

    Contains the specialty-filtered patients/consultations and all clinic
    appointments of the day. If the data cannot be loaded or the document
    cannot be built, the user is sent back to the screen with a notification.
    A valid ``download_token`` is echoed in a short-lived cookie so the screen
    knows when the file has arrived.
    """

    @method_decorator(staff_member_required)
    def get(self, request):
        day, specialty = _parse_filters(request.GET)
        snapshot = load_daily_snapshot(day, specialty, include_reports=False)

        if snapshot.has_errors:
            _notify_errors(request, snapshot)
            return redirect(_screen_url(snapshot))

        exporter = DailyReportExporter()
        try:
            pdf = exporter.render(snapshot)
        except ReportExportError as exc:
            messages.error(request, exc.message)
            return redirect(_screen_url(snapshot))

        log_report_action(
            request.user,
            "daily_report_export",
            meta={
                **snapshot.filters,
                "entries": len(snapshot.visible_entries),
                "appointments": len(snapshot.appointment_rows),
            },
        )
        logger.info("Exported %s (%d bytes)", exporter.filename(snapshot), len(pdf))

        response = FileResponse(
            io.BytesIO(pdf),
            as_attachment=True,
            filename=exporter.filename(snapshot),
            content_type="application/pdf",
        )
        token = _download_token(request.GET)
        if token:
            response.set_cookie(
                DOWNLOAD_TOKEN_COOKIE,
                token,
                max_age=DOWNLOAD_TOKEN_MAX_AGE,
                samesite="Lax",
                secure=request.is_secure(),
            )
        return response


class DailyReportAPIView(APIView):
    """JSON variant of the daily report.

    GET /api/reports/daily/?date=YYYY-MM-DD&specialty=<name>

    The response echoes the filters it was computed for so clients can drop
    responses that belong to an outdated selection.
    """

    permission_classes = [DailyReportPermission]

    def get(self, request, *args, **kwargs):
        day, specialty = _parse_filters(request.query_params)
        snapshot = load_daily_snapshot(day, specialty)

        log_report_action(request.user, "daily_report_api", meta=snapshot.filters)

        return Response(DailySnapshotSerializer(snapshot).data)
