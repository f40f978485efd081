"""Administrator endpoints: review workflow, dashboards and exports."""
from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.pagination import AdminReportPagination
from api.v1.permissions import IsAdminRole
from api.v1.report_views import ReportStoreMixin
from api.v1.serializers import (
    ReportReviewSerializer,
    UserSerializer,
    WeeklyReportSerializer,
    WeeklyReportSummarySerializer,
)
from core.export import queryset_to_csv_response
from core.pdf import pdf_response
from reports.aggregates import ReportStatistics
from reports.exports import render_user_report_pdf
from reports.filters import WeeklyReportFilter
from reports.models import WeeklyReport
from reports.services import review_report

User = get_user_model()


class AdminReportListAPIView(ReportStoreMixin, generics.ListAPIView):
    """GET /api/v1/admin/reports/?status=&user=&brand= - newest first."""

    permission_classes = [IsAdminRole]
    serializer_class = WeeklyReportSerializer
    pagination_class = AdminReportPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = WeeklyReportFilter

    def get_queryset(self):
        return self.get_store().list()


class AdminReportReviewAPIView(ReportStoreMixin, APIView):
    """PUT /api/v1/admin/reports/<id>/ - apply a review decision."""

    permission_classes = [IsAdminRole]

    def put(self, request, report_id):
        serializer = ReportReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            report = review_report(
                report_id,
                actor=request.user,
                store=self.get_store(),
                **serializer.validated_data,
            )
        except WeeklyReport.DoesNotExist:
            raise NotFound("Report not found")
        except ValueError as exc:
            raise ValidationError({"status": [str(exc)]})
        return Response(
            {
                "message": "Report updated successfully",
                "report": WeeklyReportSerializer(report).data,
            }
        )


class AdminReportCSVExportAPIView(AdminReportListAPIView):
    """GET /api/v1/admin/reports/export-csv/ - the filtered list as CSV."""

    pagination_class = None

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        columns = [
            ("id", "Report ID"),
            ("user__name", "Employee"),
            ("user__email", "Email"),
            ("user__position", "Position"),
            ("brand", "Brand"),
            ("week_start_date", "Week start"),
            ("week_end_date", "Week end"),
            ("status", "Status"),
            (lambda o: len(o.deliverables or []), "Deliverables"),
            (lambda o: len(o.next_week_targets or []), "Targets"),
            ("submitted_at", "Submitted at"),
            ("reviewed_by__name", "Reviewed by"),
            ("reviewed_at", "Reviewed at"),
            ("admin_comments", "Admin comments"),
        ]
        stamp = timezone.localdate().isoformat()
        return queryset_to_csv_response(queryset, columns, f"weekly_reports_{stamp}")


class AdminUserListAPIView(APIView):
    """GET /api/v1/admin/users/ - staff accounts sorted by name."""

    permission_classes = [IsAdminRole]

    def get(self, request):
        users = User.objects.filter(role=User.Role.STAFF).order_by("name")
        return Response({"users": UserSerializer(users, many=True).data})


class AdminDashboardAPIView(ReportStoreMixin, APIView):
    """GET /api/v1/admin/dashboard/"""

    permission_classes = [IsAdminRole]

    def get(self, request):
        statistics = ReportStatistics(store=self.get_store())
        recent = statistics.recent_reports(limit=settings.DASHBOARD_RECENT_LIMIT)
        return Response(
            {
                "stats": statistics.organization_summary(),
                "recent_reports": WeeklyReportSummarySerializer(recent, many=True).data,
                "reports_by_status": statistics.reports_by_status(),
                "top_performers": statistics.top_performers(),
            }
        )


class AdminUserExportAPIView(ReportStoreMixin, APIView):
    """GET /api/v1/admin/users/<id>/export/ - per-employee PDF summary."""

    permission_classes = [IsAdminRole]

    def get(self, request, user_id):
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound("User not found")
        content, filename = render_user_report_pdf(
            user,
            statistics=ReportStatistics(store=self.get_store()),
            recent_limit=settings.EXPORT_RECENT_LIMIT,
        )
        return pdf_response(content, filename)
