"""PDF export of the daily report (ReportLab).

The document is built from data that is already loaded (a ``DailySnapshot``);
rendering never touches the database. Layout: A4, fixed margins, a title
block, the patients/consultations table, the appointments table, and a
"Generated on" footer on every page. Tables repeat their header row when they
flow onto a new page.
"""

from __future__ import annotations

import html
import io
import logging
from datetime import date, datetime
from enum import Enum
from typing import Callable

from django.utils import timezone
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .entries import AppointmentRow, EntryRow
from .exceptions import ReportExportError
from .queries import DailySnapshot

logger = logging.getLogger(__name__)

REPORT_TITLE = "Daily Patient Report"

PAGE_MARGIN = 30
FOOTER_OFFSET = 30

ENTRY_HEADERS = ["MRN", "Patient Name", "Age/Gender", "Specialty", "Diagnosis/Department"]
APPOINTMENT_HEADERS = ["Patient Name", "Medical Number", "Specialty", "Type", "Notes"]

LABEL_IDLE = "Download PDF Report"
LABEL_GENERATING = "Generating PDF..."

PRIMARY = colors.HexColor("#1e40af")
MUTED = colors.HexColor("#4b5563")
FOOTER_GREY = colors.HexColor("#6b7280")
HEADER_BG = colors.HexColor("#f3f4f6")
RULE = colors.HexColor("#e5e7eb")


def export_filename(day: date, specialty: str = "") -> str:
    """``daily_report_<date>[_<specialty>].pdf``"""
    name = f"daily_report_{day.isoformat()}"
    if specialty:
        name = f"{name}_{specialty}"
    return f"{name}.pdf"


class ExportState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


def _esc(text) -> str:
    if text is None:
        return ""
    return html.escape(str(text))


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ReportTitle",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=24,
            leading=28,
            spaceAfter=5,
            alignment=TA_CENTER,
            textColor=PRIMARY,
        ),
        "subtitle": ParagraphStyle(
            "ReportSubtitle",
            parent=base["Normal"],
            fontSize=12,
            leading=15,
            spaceAfter=3,
            alignment=TA_CENTER,
            textColor=MUTED,
        ),
        "section": ParagraphStyle(
            "SectionTitle",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=16,
            leading=19,
            spaceBefore=15,
            spaceAfter=10,
            textColor=PRIMARY,
        ),
        "cell": ParagraphStyle(
            "Cell",
            parent=base["Normal"],
            fontSize=9,
            leading=11,
        ),
        "header_cell": ParagraphStyle(
            "HeaderCell",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=9,
            leading=11,
            textColor=PRIMARY,
        ),
    }


def _table(headers: list[str], rows: list[list[str]], width: float, styles: dict[str, ParagraphStyle]) -> Table:
    data = [[Paragraph(_esc(h), styles["header_cell"]) for h in headers]]
    data.extend([Paragraph(_esc(cell), styles["cell"]) for cell in row] for row in rows)

    table = Table(data, colWidths=[width / len(headers)] * len(headers), repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_BG),
                ("LINEBELOW", (0, 0), (-1, -1), 1, RULE),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LEFTPADDING", (0, 0), (-1, -1), 6),
                ("RIGHTPADDING", (0, 0), (-1, -1), 6),
                ("TOPPADDING", (0, 0), (-1, -1), 6),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
            ]
        )
    )
    return table


def build_story(
    rows: list[EntryRow],
    appointments: list[AppointmentRow],
    day: date,
    specialty: str = "",
    width: float = A4[0] - 2 * PAGE_MARGIN,
) -> list:
    """Declarative flowables for the report body (header, two tables)."""
    styles = _styles()

    story: list = [
        Paragraph(REPORT_TITLE, styles["title"]),
        Paragraph(f"Date: {_esc(day.isoformat())}", styles["subtitle"]),
    ]
    if specialty:
        story.append(Paragraph(f"Specialty: {_esc(specialty)}", styles["subtitle"]))
    story.append(Spacer(1, 20))

    story.append(Paragraph("Patients and Consultations", styles["section"]))
    story.append(_table(ENTRY_HEADERS, [row.cells() for row in rows], width, styles))
    story.append(Spacer(1, 20))

    story.append(Paragraph("Appointments", styles["section"]))
    story.append(_table(APPOINTMENT_HEADERS, [a.cells() for a in appointments], width, styles))

    return story


def _footer(text: str):
    def draw(canvas, doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(FOOTER_GREY)
        canvas.drawCentredString(doc.pagesize[0] / 2, FOOTER_OFFSET, text)
        canvas.restoreState()

    return draw


class DailyReportExporter:
    """Renders a ``DailySnapshot`` to PDF bytes.

    State machine: IDLE -> GENERATING -> READY, or GENERATING -> FAILED when
    the document cannot be built. ``on_state_change(state, exporter)`` is
    called on every transition; ``label`` is the text for the download
    control in the current state.
    """

    def __init__(self, on_state_change: Callable[[ExportState, DailyReportExporter], None] | None = None):
        self.state = ExportState.IDLE
        self._on_state_change = on_state_change

    @property
    def label(self) -> str:
        if self.state == ExportState.GENERATING:
            return LABEL_GENERATING
        return LABEL_IDLE

    @property
    def is_generating(self) -> bool:
        return self.state == ExportState.GENERATING

    def _set_state(self, state: ExportState) -> None:
        self.state = state
        if self._on_state_change is not None:
            self._on_state_change(state, self)

    def filename(self, snapshot: DailySnapshot) -> str:
        return export_filename(snapshot.day, snapshot.specialty)

    def render(self, snapshot: DailySnapshot, generated_at: datetime | None = None) -> bytes:
        """Build the PDF for the visible entries and all appointments of ``snapshot``."""
        generated_at = generated_at or timezone.localtime()
        self._set_state(ExportState.GENERATING)

        buf = io.BytesIO()
        try:
            doc = SimpleDocTemplate(
                buf,
                pagesize=A4,
                leftMargin=PAGE_MARGIN,
                rightMargin=PAGE_MARGIN,
                topMargin=PAGE_MARGIN,
                bottomMargin=PAGE_MARGIN + 20,
                title=REPORT_TITLE,
            )
            story = build_story(
                snapshot.entry_rows,
                snapshot.appointment_rows,
                snapshot.day,
                snapshot.specialty,
                width=doc.width,
            )
            footer = _footer(f"Generated on {generated_at:%Y-%m-%d %H:%M:%S}")
            doc.build(story, onFirstPage=footer, onLaterPages=footer)
        except Exception as exc:
            self._set_state(ExportState.FAILED)
            logger.exception("PDF generation failed for %s", snapshot.filters)
            raise ReportExportError() from exc

        self._set_state(ExportState.READY)
        return buf.getvalue()
