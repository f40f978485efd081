import uuid
from datetime import datetime

import pytest
from django.utils import timezone

from reports.models import WeeklyReport
from reports.periods import week_window
from reports.services import review_report
from reports.store import ReportStore


def _aware(*args):
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def store():
    return ReportStore()


@pytest.mark.django_db
class TestReportStore:
    def test_get_returns_report(self, store, staff_user, make_report):
        report = make_report(staff_user)

        assert store.get(report.pk) == report
        assert store.get(str(report.pk)).user == staff_user

    def test_get_unknown_or_malformed_id_raises_does_not_exist(self, store):
        with pytest.raises(WeeklyReport.DoesNotExist):
            store.get(uuid.uuid4())
        with pytest.raises(WeeklyReport.DoesNotExist):
            store.get("not-a-uuid")

    def test_get_scoped_to_owner(self, store, staff_user, other_staff_user, make_report):
        report = make_report(staff_user)

        with pytest.raises(WeeklyReport.DoesNotExist):
            store.get(report.pk, user=other_staff_user)

    def test_list_filters_by_status_user_and_brand(self, store, admin_user, staff_user, other_staff_user, make_report):
        acme = make_report(staff_user, brand="Acme Corp")
        make_report(staff_user, brand="Globex")
        other = make_report(other_staff_user, brand="ACME Labs")
        review_report(acme.pk, actor=admin_user, status=WeeklyReport.Status.APPROVED)

        assert {r.pk for r in store.list(brand="acme")} == {acme.pk, other.pk}
        assert [r.pk for r in store.list(status=WeeklyReport.Status.APPROVED)] == [acme.pk]
        assert store.list(user=other_staff_user).count() == 1
        assert store.list(user=staff_user, brand="glob").count() == 1

    def test_list_defaults_to_newest_created_first(self, store, staff_user, make_report):
        first = make_report(staff_user)
        second = make_report(staff_user)

        ordered = list(store.list())
        assert {r.pk for r in ordered} == {first.pk, second.pk}
        assert ordered[0].created_at >= ordered[1].created_at

    def test_history_orders_by_week_start_desc(self, store, staff_user, make_report):
        older = make_report(staff_user, now=_aware(2024, 6, 3, 9, 0))
        newer = make_report(staff_user, now=_aware(2024, 6, 12, 9, 0))
        oldest = make_report(staff_user, now=_aware(2024, 5, 20, 9, 0))

        assert [r.pk for r in store.history(staff_user)] == [newer.pk, older.pk, oldest.pk]

    def test_find_for_week_returns_none_without_match(self, store, staff_user, make_report):
        make_report(staff_user, now=_aware(2024, 6, 3, 9, 0))

        assert store.find_for_week(staff_user, week_window(_aware(2024, 6, 12, 9, 0))) is None

    def test_kpis_filtered_by_report(self, store, staff_user, make_report):
        report = make_report(staff_user)
        other = make_report(staff_user)
        store.create_kpi(user=staff_user, report=report, period_start=report.week_start_date, period_end=report.week_end_date)
        store.create_kpi(user=staff_user, report=other, period_start=other.week_start_date, period_end=other.week_end_date)

        assert store.kpis(report=report).count() == 1
        assert store.kpis(user=staff_user).count() == 2
