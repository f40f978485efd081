"""Persistence access for weekly reports."""
from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError

from reports.models import KPI, WeeklyReport
from reports.periods import WeekWindow


class ReportStore:
    """Query handle over persisted weekly reports.

    Views and services receive an instance instead of reaching for a global
    connection; ``using`` selects the database alias.
    """

    def __init__(self, using: str = "default") -> None:
        self.using = using

    def _queryset(self):
        return WeeklyReport.objects.using(self.using).select_related("user", "reviewed_by")

    def create(self, **fields) -> WeeklyReport:
        return WeeklyReport.objects.using(self.using).create(**fields)

    def get(self, report_id, *, user=None, for_update: bool = False) -> WeeklyReport:
        """Fetch one report; raises ``WeeklyReport.DoesNotExist`` when unknown.

        With ``user`` the lookup is restricted to reports owned by that user.
        """
        if for_update:
            qs = WeeklyReport.objects.using(self.using).select_for_update()
        else:
            qs = self._queryset()
        if user is not None:
            qs = qs.filter(user=user)
        try:
            return qs.get(pk=report_id)
        except (ValueError, DjangoValidationError) as exc:
            raise WeeklyReport.DoesNotExist(f"Invalid report id: {report_id}") from exc

    def list(self, *, status=None, user=None, brand=None, ordering=None):
        """Filtered queryset, most recently created first by default."""
        qs = self._queryset()
        if status:
            qs = qs.filter(status=status)
        if user is not None:
            qs = qs.filter(user=user)
        if brand:
            qs = qs.filter(brand__icontains=brand)
        return qs.order_by(*(ordering or ("-created_at",)))

    def history(self, user):
        """A user's reports, newest reporting week first."""
        return self.list(user=user, ordering=("-week_start_date", "-created_at"))

    def find_for_week(self, user, window: WeekWindow) -> WeeklyReport | None:
        """Most recent report of ``user`` stamped with exactly this window."""
        return (
            self._queryset()
            .filter(
                user=user,
                week_start_date=window.start,
                week_end_date=window.end,
            )
            .order_by("-created_at", "-submitted_at")
            .first()
        )

    # KPI records hang off reports and share the same alias.

    def create_kpi(self, **fields) -> KPI:
        return KPI.objects.using(self.using).create(**fields)

    def kpis(self, *, user=None, report=None):
        qs = KPI.objects.using(self.using).select_related("report")
        if user is not None:
            qs = qs.filter(user=user)
        if report is not None:
            qs = qs.filter(report=report)
        return qs.order_by("-created_at")
