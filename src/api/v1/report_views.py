"""Staff-facing weekly report endpoints."""
from rest_framework import generics, status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.pagination import KPIPagination, ReportPagination
from api.v1.permissions import IsReportOwner, IsReportOwnerOrAdmin, IsStaffMember
from api.v1.serializers import (
    KPICreateSerializer,
    KPISerializer,
    WeeklyReportCreateSerializer,
    WeeklyReportSerializer,
)
from core.pdf import pdf_response
from reports.exports import render_weekly_report_pdf
from reports.models import WeeklyReport
from reports.periods import week_window
from reports.services import KPI_METRIC_FIELDS, record_kpi, submit_report
from reports.store import ReportStore


class ReportStoreMixin:
    """Gives each view its own ``ReportStore`` handle."""

    store_class = ReportStore

    def get_store(self) -> ReportStore:
        if not hasattr(self, "_store"):
            self._store = self.store_class()
        return self._store

    def get_report(self, report_id, **lookup) -> WeeklyReport:
        try:
            report = self.get_store().get(report_id, **lookup)
        except WeeklyReport.DoesNotExist:
            raise NotFound("Report not found")
        self.check_object_permissions(self.request, report)
        return report


class ReportCreateAPIView(ReportStoreMixin, APIView):
    """POST /api/v1/reports/ - submit a report for the current week."""

    permission_classes = [IsStaffMember]

    def post(self, request):
        serializer = WeeklyReportCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            report = submit_report(user=request.user, store=self.get_store(), **serializer.validated_data)
        except ValueError as exc:
            raise ValidationError({"detail": str(exc)})
        return Response(
            {
                "message": "Weekly report submitted successfully",
                "report": WeeklyReportSerializer(report).data,
            },
            status=status.HTTP_201_CREATED,
        )


class MyReportsAPIView(ReportStoreMixin, generics.ListAPIView):
    """GET /api/v1/reports/my-reports/ - newest reporting week first."""

    permission_classes = [IsStaffMember]
    serializer_class = WeeklyReportSerializer
    pagination_class = ReportPagination

    def get_queryset(self):
        return self.get_store().history(self.request.user)


class CurrentWeekReportAPIView(ReportStoreMixin, APIView):
    """GET /api/v1/reports/current-week/ - ``{"report": null}`` when none exists."""

    permission_classes = [IsStaffMember]

    def get(self, request):
        report = self.get_store().find_for_week(request.user, week_window())
        data = WeeklyReportSerializer(report).data if report is not None else None
        return Response({"report": data})


class ReportExportAPIView(ReportStoreMixin, APIView):
    """GET /api/v1/reports/<id>/export/ - PDF of one of the caller's reports."""

    permission_classes = [IsStaffMember]

    def get(self, request, report_id):
        # Scoped to the owner so foreign ids are indistinguishable from unknown ones.
        report = self.get_report(report_id, user=request.user)
        content, filename = render_weekly_report_pdf(report)
        return pdf_response(content, filename)


class ReportKPIAPIView(ReportStoreMixin, APIView):
    """
    GET  /api/v1/reports/<id>/kpis/ - KPI records of a report (owner or admin).
    POST /api/v1/reports/<id>/kpis/ - attach a KPI record (owner only).
    """

    permission_classes = [IsStaffMember, IsReportOwnerOrAdmin]

    def get(self, request, report_id):
        report = self.get_report(report_id)
        records = self.get_store().kpis(report=report)
        return Response({"kpis": KPISerializer(records, many=True).data})

    def post(self, request, report_id):
        report = self.get_report(report_id)
        if not IsReportOwner().has_object_permission(request, self, report):
            self.permission_denied(request, message=IsReportOwner.message)

        serializer = KPICreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            kpi = record_kpi(
                report,
                actor=request.user,
                metrics={name: data[name] for name in KPI_METRIC_FIELDS},
                custom_kpis=data["custom_kpis"],
                period_start=data["period_start"],
                period_end=data["period_end"],
                store=self.get_store(),
            )
        except ValueError as exc:
            raise ValidationError({"detail": str(exc)})
        return Response(
            {"message": "KPI recorded successfully", "kpi": KPISerializer(kpi).data},
            status=status.HTTP_201_CREATED,
        )


class MyKPIListAPIView(ReportStoreMixin, generics.ListAPIView):
    """GET /api/v1/kpis/ - the caller's KPI records, newest first."""

    permission_classes = [IsStaffMember]
    serializer_class = KPISerializer
    pagination_class = KPIPagination

    def get_queryset(self):
        return self.get_store().kpis(user=self.request.user)
