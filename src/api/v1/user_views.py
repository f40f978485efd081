"""Self-service profile and personal dashboard."""
from django.conf import settings
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.services import update_profile
from api.v1.permissions import IsStaffMember
from api.v1.report_views import ReportStoreMixin
from api.v1.serializers import (
    CurrentWeekReportSerializer,
    ProfileUpdateSerializer,
    UserSerializer,
    WeeklyReportSummarySerializer,
)
from reports.aggregates import ReportStatistics
from reports.periods import week_window


class ProfileAPIView(APIView):
    """
    GET /api/v1/users/profile/ - the caller's profile.
    PUT /api/v1/users/profile/ - update ``name`` and/or ``position``.
    """

    permission_classes = [IsStaffMember]

    def get(self, request):
        return Response({"user": UserSerializer(request.user).data})

    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = update_profile(request.user, **serializer.validated_data)
        return Response(
            {
                "message": "Profile updated successfully",
                "user": UserSerializer(user).data,
            }
        )


class UserDashboardAPIView(ReportStoreMixin, APIView):
    """GET /api/v1/users/dashboard/ - personal statistics and the current week."""

    permission_classes = [IsStaffMember]

    def get(self, request):
        store = self.get_store()
        statistics = ReportStatistics(store=store)
        window = week_window()
        current = store.find_for_week(request.user, window)
        recent = statistics.recent_reports(user=request.user, limit=settings.DASHBOARD_RECENT_LIMIT)
        return Response(
            {
                "stats": statistics.user_summary(request.user),
                "recent_reports": WeeklyReportSummarySerializer(recent, many=True).data,
                "current_week_report": CurrentWeekReportSerializer(current).data if current else None,
                "week_dates": window.as_dict(),
            }
        )
