"""Read-only statistics over weekly reports."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Count

from accounts.models import User
from reports.models import WeeklyReport
from reports.store import ReportStore

Status = WeeklyReport.Status


def approval_rate(approved: int, total: int) -> int:
    """Approved share as a whole percentage, rounding halves up; 0 when empty."""
    if total <= 0:
        return 0
    rate = Decimal(approved) * 100 / Decimal(total)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ReportStatistics:
    """Dashboard figures computed straight from the report store.

    Nothing is cached: each method issues fresh queries, so results always
    reflect the stored state at call time.
    """

    def __init__(self, store: ReportStore | None = None) -> None:
        self.store = store or ReportStore()

    def status_counts(self, user=None) -> dict[str, int]:
        counts = {value: 0 for value in Status.values}
        rows = (
            self.store.list(user=user)
            .order_by()
            .values("status")
            .annotate(count=Count("id"))
        )
        for row in rows:
            counts[row["status"]] = row["count"]
        return counts

    def user_summary(self, user) -> dict:
        counts = self.status_counts(user=user)
        total = sum(counts.values())
        approved = counts[Status.APPROVED]
        return {
            "total_reports": total,
            "approved_reports": approved,
            "pending_reports": counts[Status.SUBMITTED],
            "needs_revision": counts[Status.NEEDS_REVISION],
            "approval_rate": approval_rate(approved, total),
        }

    def organization_summary(self) -> dict:
        counts = self.status_counts()
        total_users = (
            User.objects.using(self.store.using)
            .filter(role=User.Role.STAFF, is_active=True)
            .count()
        )
        return {
            "total_users": total_users,
            "total_reports": sum(counts.values()),
            "pending_reports": counts[Status.SUBMITTED],
            "approved_reports": counts[Status.APPROVED],
        }

    def reports_by_status(self) -> list[dict]:
        return [
            {"status": status, "count": count}
            for status, count in self.status_counts().items()
            if count
        ]

    def top_performers(self, limit: int = 5) -> list[dict]:
        """Owners ranked by number of approved reports."""
        rows = (
            self.store.list(status=Status.APPROVED)
            .order_by()
            .values("user_id", "user__name", "user__position")
            .annotate(report_count=Count("id"))
            .order_by("-report_count", "user__name")[:limit]
        )
        return [
            {
                "user_id": str(row["user_id"]),
                "name": row["user__name"],
                "position": row["user__position"],
                "report_count": row["report_count"],
            }
            for row in rows
        ]

    def recent_reports(self, user=None, limit: int = 5):
        return list(self.store.list(user=user)[:limit])
