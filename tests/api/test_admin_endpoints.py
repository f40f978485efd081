"""Tests for administrator endpoints."""
import uuid

import pytest
from django.contrib.auth import get_user_model

from reports import exports
from reports.models import WeeklyReport
from reports.services import review_report

User = get_user_model()
Status = WeeklyReport.Status


@pytest.mark.django_db
class TestAdminReportList:
    """GET /api/v1/admin/reports/"""

    def test_lists_all_reports_newest_first(self, admin_client, staff_user, other_staff_user, make_report):
        make_report(staff_user)
        latest = make_report(other_staff_user)

        resp = admin_client.get("/api/v1/admin/reports/")

        assert resp.status_code == 200
        assert resp.data["pagination"]["total"] == 2
        assert resp.data["reports"][0]["id"] == str(latest.pk)

    def test_filters(self, admin_client, admin_user, staff_user, other_staff_user, make_report):
        acme = make_report(staff_user, brand="Acme Corp")
        make_report(staff_user, brand="Globex")
        make_report(other_staff_user, brand="acme labs")
        review_report(acme.pk, actor=admin_user, status=Status.APPROVED)

        by_brand = admin_client.get("/api/v1/admin/reports/", {"brand": "ACME"})
        by_status = admin_client.get("/api/v1/admin/reports/", {"status": "Approved"})
        by_user = admin_client.get("/api/v1/admin/reports/", {"user": str(other_staff_user.pk)})
        combined = admin_client.get("/api/v1/admin/reports/", {"brand": "acme", "user": str(staff_user.pk)})

        assert by_brand.data["pagination"]["total"] == 2
        assert [r["id"] for r in by_status.data["reports"]] == [str(acme.pk)]
        assert by_user.data["pagination"]["total"] == 1
        assert combined.data["pagination"]["total"] == 1

    def test_user_id_alias(self, admin_client, staff_user, other_staff_user, make_report):
        mine = make_report(staff_user)
        make_report(other_staff_user)

        resp = admin_client.get("/api/v1/admin/reports/", {"userId": str(staff_user.pk)})

        assert resp.status_code == 200
        assert [r["id"] for r in resp.data["reports"]] == [str(mine.pk)]

    def test_default_page_size_is_twenty(self, admin_client, staff_user, make_report):
        for _ in range(21):
            make_report(staff_user)

        resp = admin_client.get("/api/v1/admin/reports/")

        assert len(resp.data["reports"]) == 20
        assert resp.data["pagination"] == {"current": 1, "pages": 2, "total": 21}

    def test_staff_forbidden(self, staff_client):
        resp = staff_client.get("/api/v1/admin/reports/")

        assert resp.status_code == 403
        assert resp.data == {"error": "Admin access required."}


@pytest.mark.django_db
class TestAdminReview:
    """PUT /api/v1/admin/reports/<id>/"""

    def test_approve(self, admin_client, admin_user, staff_user, make_report):
        report = make_report(staff_user)

        resp = admin_client.put(
            f"/api/v1/admin/reports/{report.pk}/",
            {"status": "Approved", "admin_comments": "Great work"},
            format="json",
        )

        assert resp.status_code == 200
        assert resp.data["message"] == "Report updated successfully"
        assert resp.data["report"]["status"] == "Approved"
        assert resp.data["report"]["admin_comments"] == "Great work"
        assert resp.data["report"]["reviewed_by"]["name"] == "Ada Admin"
        assert resp.data["report"]["reviewed_at"] is not None

    @pytest.mark.parametrize("target", ["Submitted", "Draft", "Rejected"])
    def test_invalid_status(self, admin_client, staff_user, make_report, target):
        report = make_report(staff_user)

        resp = admin_client.put(f"/api/v1/admin/reports/{report.pk}/", {"status": target}, format="json")

        assert resp.status_code == 400
        assert resp.data["error"] == "Validation failed"
        assert "status" in resp.data["details"]
        report.refresh_from_db()
        assert report.status == Status.SUBMITTED

    def test_unknown_report(self, admin_client):
        resp = admin_client.put(f"/api/v1/admin/reports/{uuid.uuid4()}/", {"status": "Approved"}, format="json")

        assert resp.status_code == 404
        assert resp.data == {"error": "Report not found"}

    def test_invalid_status_on_unknown_report_is_validation_error(self, admin_client):
        resp = admin_client.put(f"/api/v1/admin/reports/{uuid.uuid4()}/", {"status": "Nope"}, format="json")

        assert resp.status_code == 400

    def test_staff_forbidden_without_mutation(self, staff_client, staff_user, make_report):
        report = make_report(staff_user)

        resp = staff_client.put(f"/api/v1/admin/reports/{report.pk}/", {"status": "Bogus"}, format="json")

        assert resp.status_code == 403
        report.refresh_from_db()
        assert report.status == Status.SUBMITTED


@pytest.mark.django_db
class TestAdminUsersAndDashboard:
    def test_users_lists_staff_sorted_by_name(self, admin_client, staff_user, other_staff_user):
        resp = admin_client.get("/api/v1/admin/users/")

        assert resp.status_code == 200
        assert [u["name"] for u in resp.data["users"]] == ["Jane Staff", "Omar Other"]
        assert all("password" not in u for u in resp.data["users"])

    def test_dashboard(self, admin_client, admin_user, staff_user, other_staff_user, make_report):
        approved = make_report(staff_user)
        make_report(other_staff_user)
        review_report(approved.pk, actor=admin_user, status=Status.APPROVED)

        resp = admin_client.get("/api/v1/admin/dashboard/")

        assert resp.status_code == 200
        assert resp.data["stats"] == {
            "total_users": 2,
            "total_reports": 2,
            "pending_reports": 1,
            "approved_reports": 1,
        }
        assert len(resp.data["recent_reports"]) == 2
        assert {row["status"] for row in resp.data["reports_by_status"]} == {"Approved", "Submitted"}
        assert resp.data["top_performers"][0]["name"] == "Jane Staff"
        assert resp.data["top_performers"][0]["report_count"] == 1

    def test_dashboard_top_performers_capped_at_five(self, settings, admin_client, admin_user, make_report):
        settings.DASHBOARD_RECENT_LIMIT = 8
        for index in range(7):
            owner = User.objects.create_user(
                email=f"performer{index}@test.com",
                password="TestPass123!",
                name=f"Performer {index}",
                position=User.Position.CONTENT_CREATOR,
            )
            report = make_report(owner)
            review_report(report.pk, actor=admin_user, status=Status.APPROVED)

        resp = admin_client.get("/api/v1/admin/dashboard/")

        assert resp.status_code == 200
        assert len(resp.data["top_performers"]) == 5
        assert len(resp.data["recent_reports"]) == 7

    def test_dashboard_forbidden_for_staff(self, staff_client):
        assert staff_client.get("/api/v1/admin/dashboard/").status_code == 403


@pytest.mark.django_db
class TestAdminExports:
    def test_user_export_pdf(self, monkeypatch, admin_client, staff_user, make_report):
        monkeypatch.setattr(exports, "render_pdf_bytes", lambda template_name, context: b"%PDF-1.7 user")
        make_report(staff_user)

        resp = admin_client.get(f"/api/v1/admin/users/{staff_user.pk}/export/")

        assert resp.status_code == 200
        assert resp["Content-Type"] == "application/pdf"
        assert 'filename="User_Report_Jane_Staff_' in resp["Content-Disposition"]

    def test_user_export_unknown_user(self, admin_client):
        resp = admin_client.get(f"/api/v1/admin/users/{uuid.uuid4()}/export/")

        assert resp.status_code == 404
        assert resp.data == {"error": "User not found"}

    def test_reports_csv(self, admin_client, staff_user, make_report):
        make_report(staff_user, brand="Acme")
        make_report(staff_user, brand="Globex")

        resp = admin_client.get("/api/v1/admin/reports/export-csv/", {"brand": "glob"})

        assert resp.status_code == 200
        assert resp["Content-Type"].startswith("text/csv")
        body = resp.content.decode("utf-8-sig")
        lines = body.strip().splitlines()
        assert lines[0].startswith("Report ID,Employee,Email")
        assert len(lines) == 2
        assert "Globex" in lines[1]
