"""Query-string filters for report listings."""
import django_filters

from reports.models import WeeklyReport


class WeeklyReportFilter(django_filters.FilterSet):
    """``?status=&user=&brand=`` for the admin report list.

    ``userId`` is accepted as an alias of ``user`` for older clients.
    """

    status = django_filters.ChoiceFilter(choices=WeeklyReport.Status.choices)
    user = django_filters.UUIDFilter(field_name="user_id")
    userId = django_filters.UUIDFilter(field_name="user_id")
    brand = django_filters.CharFilter(field_name="brand", lookup_expr="icontains")

    class Meta:
        model = WeeklyReport
        fields = ["status", "user", "brand"]
