"""Main API URL router for /api/v1/."""
from django.urls import path

from api.auth_views import (
    ChangePasswordAPIView,
    LoginAPIView,
    LogoutAPIView,
    MeAPIView,
    RefreshAPIView,
    RegisterAPIView,
)
from api.v1 import admin_views, report_views, user_views
from core.views import health

app_name = "api"
urlpatterns = [
    # Auth endpoints
    path("auth/register/", RegisterAPIView.as_view(), name="auth-register"),
    path("auth/login/", LoginAPIView.as_view(), name="auth-login"),
    path("auth/token/refresh/", RefreshAPIView.as_view(), name="token_refresh"),
    path("auth/logout/", LogoutAPIView.as_view(), name="auth-logout"),
    path("auth/me/", MeAPIView.as_view(), name="auth-me"),
    path("auth/password/change/", ChangePasswordAPIView.as_view(), name="auth-password-change"),

    # Reports
    path("reports/", report_views.ReportCreateAPIView.as_view(), name="report-create"),
    path("reports/my-reports/", report_views.MyReportsAPIView.as_view(), name="report-mine"),
    path("reports/current-week/", report_views.CurrentWeekReportAPIView.as_view(), name="report-current-week"),
    path("reports/<uuid:report_id>/export/", report_views.ReportExportAPIView.as_view(), name="report-export"),
    path("reports/<uuid:report_id>/kpis/", report_views.ReportKPIAPIView.as_view(), name="report-kpis"),
    path("kpis/", report_views.MyKPIListAPIView.as_view(), name="kpi-mine"),

    # Admin
    path("admin/reports/", admin_views.AdminReportListAPIView.as_view(), name="admin-reports"),
    path("admin/reports/export-csv/", admin_views.AdminReportCSVExportAPIView.as_view(), name="admin-reports-csv"),
    path("admin/reports/<uuid:report_id>/", admin_views.AdminReportReviewAPIView.as_view(), name="admin-report-review"),
    path("admin/users/", admin_views.AdminUserListAPIView.as_view(), name="admin-users"),
    path("admin/users/<uuid:user_id>/export/", admin_views.AdminUserExportAPIView.as_view(), name="admin-user-export"),
    path("admin/dashboard/", admin_views.AdminDashboardAPIView.as_view(), name="admin-dashboard"),

    # Users
    path("users/profile/", user_views.ProfileAPIView.as_view(), name="user-profile"),
    path("users/dashboard/", user_views.UserDashboardAPIView.as_view(), name="user-dashboard"),

    # Health
    path("health/", health, name="health"),
]
