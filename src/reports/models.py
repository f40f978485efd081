"""Models for the reports app."""
from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import date

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.dateparse import parse_date

from core.models import TimeStampedModel


class DeliverableStatus(models.TextChoices):
    COMPLETED = "Completed", "Completed"
    IN_PROGRESS = "In Progress", "In Progress"
    PENDING = "Pending", "Pending"
    CANCELLED = "Cancelled", "Cancelled"


class TargetPriority(models.TextChoices):
    LOW = "Low", "Low"
    MEDIUM = "Medium", "Medium"
    HIGH = "High", "High"
    CRITICAL = "Critical", "Critical"


# ---------------------------------------------------------------------------
# Value types embedded in WeeklyReport JSON columns
# ---------------------------------------------------------------------------

def _coerce_date(value, *, label: str) -> date | None:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value if type(value) is date else value.date()
    parsed = parse_date(str(value)[:10])
    if parsed is None:
        raise ValueError(f"{label} must be an ISO date (YYYY-MM-DD).")
    return parsed


def _required_text(data: dict, key: str) -> str:
    value = str(data.get(key) or "").strip()
    if not value:
        raise ValueError(f"{key} is required.")
    return value


@dataclass(frozen=True)
class Deliverable:
    """A work item reported for the current week."""

    title: str
    description: str
    status: str = DeliverableStatus.COMPLETED
    completion_date: date | None = None

    @classmethod
    def from_dict(cls, data: dict, *, default_date: date | None = None) -> "Deliverable":
        status = data.get("status") or DeliverableStatus.COMPLETED
        if status not in DeliverableStatus.values:
            raise ValueError(f"status must be one of {', '.join(DeliverableStatus.values)}.")
        completion_date = _coerce_date(data.get("completion_date"), label="completion_date")
        return cls(
            title=_required_text(data, "title"),
            description=_required_text(data, "description"),
            status=str(status),
            completion_date=completion_date or default_date,
        )

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["completion_date"] = self.completion_date.isoformat() if self.completion_date else None
        return payload


@dataclass(frozen=True)
class Target:
    """A work item planned for the upcoming week."""

    title: str
    description: str
    due_date: date
    priority: str = TargetPriority.MEDIUM

    @classmethod
    def from_dict(cls, data: dict, **_ignored) -> "Target":
        priority = data.get("priority") or TargetPriority.MEDIUM
        if priority not in TargetPriority.values:
            raise ValueError(f"priority must be one of {', '.join(TargetPriority.values)}.")
        due_date = _coerce_date(data.get("due_date"), label="due_date")
        if due_date is None:
            raise ValueError("due_date is required.")
        return cls(
            title=_required_text(data, "title"),
            description=_required_text(data, "description"),
            due_date=due_date,
            priority=str(priority),
        )

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["due_date"] = self.due_date.isoformat()
        return payload


@dataclass(frozen=True)
class KPISnapshot:
    """Numeric performance metrics attached to one report."""

    engagement_rate: float = 0
    reach: int = 0
    conversions: int = 0
    custom_metrics: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "KPISnapshot":
        data = data or {}
        metrics = []
        for metric in data.get("custom_metrics") or []:
            name = str(metric.get("name") or "").strip()
            if not name:
                raise ValueError("custom metric name is required.")
            metrics.append(
                {
                    "name": name,
                    "value": float(metric.get("value") or 0),
                    "unit": str(metric.get("unit") or ""),
                }
            )
        return cls(
            engagement_rate=float(data.get("engagement_rate") or 0),
            reach=int(data.get("reach") or 0),
            conversions=int(data.get("conversions") or 0),
            custom_metrics=metrics,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @property
    def is_empty(self) -> bool:
        return not (self.engagement_rate or self.reach or self.conversions or self.custom_metrics)


# ---------------------------------------------------------------------------
# Weekly report aggregate
# ---------------------------------------------------------------------------

class WeeklyReport(TimeStampedModel):
    """One staff member's report for a Monday-Friday window.

    Deliverables, next-week targets and the KPI snapshot are owned by the
    report and stored inline as JSON. The week window is always computed at
    submission time (see ``reports.periods``).
    """

    class Status(models.TextChoices):
        DRAFT = "Draft", "Draft"
        SUBMITTED = "Submitted", "Submitted"
        UNDER_REVIEW = "Under Review", "Under Review"
        APPROVED = "Approved", "Approved"
        NEEDS_REVISION = "Needs Revision", "Needs Revision"

    REVIEW_STATUSES = (
        Status.UNDER_REVIEW,
        Status.APPROVED,
        Status.NEEDS_REVISION,
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="weekly_reports",
        verbose_name="employee",
    )
    week_start_date = models.DateTimeField("week start")
    week_end_date = models.DateTimeField("week end")
    brand = models.CharField("brand", max_length=200, db_index=True)
    deliverables = models.JSONField("deliverables", default=list, encoder=DjangoJSONEncoder)
    next_week_targets = models.JSONField("next week targets", default=list, encoder=DjangoJSONEncoder)
    additional_notes = models.TextField("additional notes", blank=True, default="")
    kpis = models.JSONField("KPI snapshot", default=dict, blank=True, encoder=DjangoJSONEncoder)
    status = models.CharField(
        "status",
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )
    admin_comments = models.TextField("admin comments", blank=True, default="")
    submitted_at = models.DateTimeField("submitted at", null=True, blank=True)
    reviewed_at = models.DateTimeField("reviewed at", null=True, blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_reports",
        verbose_name="reviewed by",
    )

    class Meta:
        verbose_name = "weekly report"
        verbose_name_plural = "weekly reports"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-week_start_date"], name="report_user_week_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.brand} ({self.week_start_date:%Y-%m-%d})"

    @property
    def deliverable_items(self) -> list[Deliverable]:
        return [Deliverable.from_dict(item) for item in self.deliverables or []]

    @property
    def target_items(self) -> list[Target]:
        return [Target.from_dict(item) for item in self.next_week_targets or []]

    @property
    def kpi_snapshot(self) -> KPISnapshot:
        return KPISnapshot.from_dict(self.kpis)


class KPI(TimeStampedModel):
    """Standalone KPI bundle recorded against a submitted report.

    Owner and report are fixed at creation; the record is never edited.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="kpi_records",
        verbose_name="employee",
    )
    report = models.ForeignKey(
        WeeklyReport,
        on_delete=models.CASCADE,
        related_name="kpi_records",
        verbose_name="report",
    )

    social_media_followers = models.PositiveIntegerField("social media followers", default=0)
    engagement_rate = models.FloatField("engagement rate", default=0)
    reach = models.PositiveIntegerField("reach", default=0)
    impressions = models.PositiveIntegerField("impressions", default=0)
    clicks = models.PositiveIntegerField("clicks", default=0)
    conversions = models.PositiveIntegerField("conversions", default=0)
    content_created = models.PositiveIntegerField("content created", default=0)
    campaigns_launched = models.PositiveIntegerField("campaigns launched", default=0)
    custom_kpis = models.JSONField("custom KPIs", default=list, blank=True, encoder=DjangoJSONEncoder)

    period_start = models.DateTimeField("period start")
    period_end = models.DateTimeField("period end")

    class Meta:
        verbose_name = "KPI"
        verbose_name_plural = "KPIs"
        ordering = ["-created_at"]

    def __str__(self):
        return f"KPI {self.user} - {self.period_start:%Y-%m-%d}"
