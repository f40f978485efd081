"""Weekly report submission, review workflow and KPI recording."""
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from accounts.services import authorize
from reports.models import KPI, Deliverable, KPISnapshot, Target, WeeklyReport
from reports.periods import week_window
from reports.store import ReportStore

logger = logging.getLogger("hr360")

KPI_METRIC_FIELDS = (
    "social_media_followers",
    "engagement_rate",
    "reach",
    "impressions",
    "clicks",
    "conversions",
    "content_created",
    "campaigns_launched",
)


def _normalize_items(items, value_type, label: str, **defaults) -> list[dict]:
    if not items:
        raise ValueError(f"At least one {label} is required.")
    normalized = []
    for index, item in enumerate(items, start=1):
        if isinstance(item, value_type):
            normalized.append(item.to_dict())
            continue
        if not isinstance(item, dict):
            raise ValueError(f"{label} #{index} must be an object.")
        try:
            normalized.append(value_type.from_dict(item, **defaults).to_dict())
        except ValueError as exc:
            raise ValueError(f"{label} #{index}: {exc}") from exc
    return normalized


def submit_report(
    *,
    user,
    brand: str,
    deliverables,
    next_week_targets,
    additional_notes: str = "",
    kpis: dict | None = None,
    now=None,
    store: ReportStore | None = None,
) -> WeeklyReport:
    """Create a submitted report for the week containing ``now``.

    Every call inserts a new row; earlier reports for the same week are left
    untouched.
    """
    brand = (brand or "").strip()
    if not brand:
        raise ValueError("Brand is required.")

    now = now or timezone.now()
    window = week_window(now)
    today = timezone.localtime(now).date() if timezone.is_aware(now) else now.date()
    store = store or ReportStore()

    report = store.create(
        user=user,
        week_start_date=window.start,
        week_end_date=window.end,
        brand=brand,
        deliverables=_normalize_items(deliverables, Deliverable, "deliverable", default_date=today),
        next_week_targets=_normalize_items(next_week_targets, Target, "next week target"),
        additional_notes=(additional_notes or "").strip(),
        kpis=KPISnapshot.from_dict(kpis).to_dict(),
        status=WeeklyReport.Status.SUBMITTED,
        submitted_at=now,
    )

    logger.info(
        "Weekly report submitted: %s user=%s week=%s brand=%s",
        report.pk,
        user.pk,
        window.start.date().isoformat(),
        brand,
    )
    return report


def review_report(
    report_id,
    *,
    actor,
    status: str,
    admin_comments: str = "",
    now=None,
    store: ReportStore | None = None,
) -> WeeklyReport:
    """Apply an admin review decision to a report.

    Raises ``PermissionDenied`` for non-admin actors, ``ValueError`` for a
    status outside ``WeeklyReport.REVIEW_STATUSES`` and
    ``WeeklyReport.DoesNotExist`` for an unknown id. Nothing is written when
    any check fails.
    """
    if not authorize(actor, User.Role.ADMIN):
        raise PermissionDenied("Admin access required.")
    if status not in WeeklyReport.REVIEW_STATUSES:
        allowed = ", ".join(str(value) for value in WeeklyReport.REVIEW_STATUSES)
        raise ValueError(f"Invalid status. Allowed values: {allowed}.")

    store = store or ReportStore()
    with transaction.atomic(using=store.using):
        report = store.get(report_id, for_update=True)
        previous = report.status
        report.status = status
        report.admin_comments = (admin_comments or "").strip()
        report.reviewed_at = now or timezone.now()
        report.reviewed_by = actor
        report.save(
            update_fields=[
                "status",
                "admin_comments",
                "reviewed_at",
                "reviewed_by",
                "updated_at",
            ]
        )

    logger.info(
        "Weekly report reviewed: %s %s -> %s by=%s",
        report.pk,
        previous,
        status,
        actor.pk,
    )
    return store.get(report.pk)


def record_kpi(
    report: WeeklyReport,
    *,
    actor,
    metrics: dict | None = None,
    custom_kpis=None,
    period_start=None,
    period_end=None,
    store: ReportStore | None = None,
) -> KPI:
    """Attach a standalone KPI bundle to one of the actor's reports.

    The period defaults to the report's own week window.
    """
    if report.user_id != actor.pk:
        raise PermissionDenied("You can only record KPIs for your own reports.")

    metrics = metrics or {}
    values = {}
    for name in KPI_METRIC_FIELDS:
        value = metrics.get(name) or 0
        if value < 0:
            raise ValueError(f"{name} cannot be negative.")
        values[name] = value

    entries = []
    for index, entry in enumerate(custom_kpis or [], start=1):
        name = str(entry.get("name") or "").strip()
        if not name or entry.get("value") is None:
            raise ValueError(f"custom KPI #{index}: name and value are required.")
        entries.append(
            {
                "name": name,
                "value": float(entry["value"]),
                "unit": str(entry.get("unit") or ""),
                "target": float(entry.get("target") or 0),
            }
        )

    period_start = period_start or report.week_start_date
    period_end = period_end or report.week_end_date
    if period_end < period_start:
        raise ValueError("period_end must not be before period_start.")

    store = store or ReportStore()
    kpi = store.create_kpi(
        user=actor,
        report=report,
        custom_kpis=entries,
        period_start=period_start,
        period_end=period_end,
        **values,
    )
    logger.info("KPI recorded: %s report=%s user=%s", kpi.pk, report.pk, actor.pk)
    return kpi
