from datetime import datetime

import pytest
from django.template.loader import render_to_string
from django.utils import timezone

from core.pdf import safe_pdf_filename
from reports import exports
from reports.models import WeeklyReport
from reports.services import review_report


def _aware(*args):
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def rendered(monkeypatch):
    """Replace WeasyPrint with the rendered HTML so templates stay under test."""
    calls = []

    def fake_render(template_name, context):
        html = render_to_string(template_name, context)
        calls.append((template_name, html))
        return b"%PDF-1.7\n" + html.encode("utf-8")

    monkeypatch.setattr(exports, "render_pdf_bytes", fake_render)
    return calls


def test_safe_pdf_filename():
    assert safe_pdf_filename("Weekly Report  Jane Doe") == "Weekly_Report_Jane_Doe.pdf"
    assert safe_pdf_filename('a/b:c*?"d') == "abcd.pdf"
    assert safe_pdf_filename("   ", fallback="Report") == "Report.pdf"


@pytest.mark.django_db
class TestWeeklyReportPDF:
    def test_filename_uses_owner_name_and_week_start(self, staff_user, make_report):
        report = make_report(staff_user, now=_aware(2024, 6, 12, 10, 0))

        assert exports.weekly_report_filename(report) == "Weekly_Report_Jane_Staff_2024-06-10.pdf"

    def test_render_includes_report_sections(self, rendered, staff_user, make_report):
        report = make_report(
            staff_user,
            now=_aware(2024, 6, 12, 10, 0),
            additional_notes="Shipped early",
            kpis={"engagement_rate": 4.5, "reach": 12000},
        )

        content, filename = exports.render_weekly_report_pdf(report)

        assert content.startswith(b"%PDF")
        assert filename.endswith(".pdf")
        template, html = rendered[0]
        assert template == exports.WEEKLY_REPORT_TEMPLATE
        assert "Jane Staff" in html
        assert "Acme" in html
        assert "Deliverables Completed" in html
        assert "Next Week Targets" in html
        assert "Engagement Rate: 4.5%" in html
        assert "Shipped early" in html

    def test_kpi_section_hidden_when_snapshot_empty(self, rendered, staff_user, make_report):
        report = make_report(staff_user)

        exports.render_weekly_report_pdf(report)

        assert "<h2>KPIs</h2>" not in rendered[0][1]


@pytest.mark.django_db
class TestUserReportPDF:
    def test_render_includes_summary_and_recent_reports(self, rendered, admin_user, staff_user, make_report):
        first = make_report(staff_user, brand="Acme", now=_aware(2024, 6, 3, 9, 0))
        make_report(staff_user, brand="Globex", now=_aware(2024, 6, 12, 9, 0))
        review_report(first.pk, actor=admin_user, status=WeeklyReport.Status.APPROVED)

        content, filename = exports.render_user_report_pdf(
            staff_user, recent_limit=1, now=_aware(2024, 6, 14, 12, 0)
        )

        assert filename == "User_Report_Jane_Staff_2024-06-14.pdf"
        html = rendered[0][1]
        assert "Approval Rate: 50%" in html
        assert "Total Reports Submitted: 2" in html
        assert "Globex" in html
        assert "Brand: Acme" not in html

    def test_context_summary_uses_all_reports(self, staff_user, make_report):
        for _ in range(3):
            make_report(staff_user)

        context = exports.build_user_report_context(
            staff_user, statistics=exports.ReportStatistics(), recent_limit=2
        )

        assert context["summary"]["total_reports"] == 3
        assert len(context["recent_reports"]) == 2
