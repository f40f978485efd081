"""PDF summaries of weekly reports and per-employee performance."""
from __future__ import annotations

import logging

from django.utils import timezone

from core.pdf import render_pdf_bytes, safe_pdf_filename
from reports.aggregates import ReportStatistics
from reports.models import WeeklyReport

logger = logging.getLogger("hr360")

WEEKLY_REPORT_TEMPLATE = "reports/pdf/weekly_report.html"
USER_REPORT_TEMPLATE = "reports/pdf/user_report.html"


def weekly_report_filename(report: WeeklyReport) -> str:
    week = timezone.localtime(report.week_start_date).date().isoformat()
    return safe_pdf_filename(f"Weekly_Report_{report.user.name}_{week}", fallback="Weekly_Report")


def user_report_filename(user, *, now=None) -> str:
    today = timezone.localtime(now or timezone.now()).date().isoformat()
    return safe_pdf_filename(f"User_Report_{user.name}_{today}", fallback="User_Report")


def build_weekly_report_context(report: WeeklyReport) -> dict:
    kpis = report.kpi_snapshot
    return {
        "report": report,
        "employee": report.user,
        "week_start": timezone.localtime(report.week_start_date),
        "week_end": timezone.localtime(report.week_end_date),
        "deliverables": report.deliverable_items,
        "targets": report.target_items,
        "kpis": kpis,
        "show_kpis": not kpis.is_empty,
    }


def build_user_report_context(user, *, statistics: ReportStatistics, recent_limit: int, now=None) -> dict:
    recent = [
        {
            "week_start": timezone.localtime(report.week_start_date),
            "brand": report.brand,
            "status": report.status,
            "deliverable_count": len(report.deliverables or []),
        }
        for report in statistics.store.history(user)[:recent_limit]
    ]
    return {
        "employee": user,
        "generated_at": timezone.localtime(now or timezone.now()),
        "summary": statistics.user_summary(user),
        "recent_reports": recent,
    }


def render_weekly_report_pdf(report: WeeklyReport) -> tuple[bytes, str]:
    """Render one report; returns ``(pdf_bytes, filename)``."""
    content = render_pdf_bytes(WEEKLY_REPORT_TEMPLATE, build_weekly_report_context(report))
    logger.info("Weekly report exported: %s (%d bytes)", report.pk, len(content))
    return content, weekly_report_filename(report)


def render_user_report_pdf(user, *, statistics: ReportStatistics | None = None, recent_limit: int = 5, now=None):
    """Render an employee performance summary; returns ``(pdf_bytes, filename)``."""
    statistics = statistics or ReportStatistics()
    context = build_user_report_context(user, statistics=statistics, recent_limit=recent_limit, now=now)
    content = render_pdf_bytes(USER_REPORT_TEMPLATE, context)
    logger.info("User report exported: %s (%d bytes)", user.pk, len(content))
    return content, user_report_filename(user, now=now)
