"""CSV export utilities."""
import csv
from datetime import date, datetime

from django.http import HttpResponse
from django.utils import timezone


def _resolve(obj, field):
    if callable(field):
        return field(obj)
    value = obj
    for part in field.split("__"):
        value = getattr(value, part, None)
        if value is None:
            return ""
    return value


def _format(value):
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    return "" if value is None else str(value)


def queryset_to_csv_response(queryset, columns, filename):
    """Convert a queryset to a CSV HttpResponse.

    Args:
        queryset: Django QuerySet
        columns: list of (field_path_or_callable, header_label) tuples.
            A string may traverse relations with ``__`` (``user__name``).
            A callable is called with the object.
        filename: download filename (without extension)
    """
    response = HttpResponse(content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{filename}.csv"'
    # UTF-8 BOM for Excel compatibility
    response.write("\ufeff")

    writer = csv.writer(response)
    writer.writerow([label for _, label in columns])
    for obj in queryset.iterator():
        writer.writerow([_format(_resolve(obj, field)) for field, _ in columns])
    return response
