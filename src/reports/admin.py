"""Admin configuration for the reports app."""
from django.contrib import admin

from reports.models import KPI, WeeklyReport


@admin.register(WeeklyReport)
class WeeklyReportAdmin(admin.ModelAdmin):
    """Read-mostly admin; review decisions go through the API workflow."""

    list_display = (
        "user",
        "brand",
        "week_start_date",
        "status",
        "submitted_at",
        "reviewed_by",
        "reviewed_at",
    )
    list_filter = ("status", "week_start_date")
    search_fields = ("brand", "user__name", "user__email")
    list_select_related = ("user", "reviewed_by")
    date_hierarchy = "week_start_date"
    readonly_fields = (
        "id",
        "week_start_date",
        "week_end_date",
        "submitted_at",
        "reviewed_at",
        "reviewed_by",
        "created_at",
        "updated_at",
    )
    ordering = ["-created_at"]


@admin.register(KPI)
class KPIAdmin(admin.ModelAdmin):
    list_display = ("user", "report", "period_start", "reach", "engagement_rate", "conversions")
    search_fields = ("user__name", "user__email", "report__brand")
    list_select_related = ("user", "report")
    readonly_fields = ("id", "user", "report", "created_at", "updated_at")
    ordering = ["-created_at"]
