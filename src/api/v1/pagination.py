"""Pagination utilities for API v1."""
import math

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class ReportPagination(PageNumberPagination):
    """``?page=&limit=`` pagination answering ``{reports, pagination}``.

    ``pages`` is ``ceil(total / limit)``.
    """

    page_size = settings.REPORTS_PAGE_SIZE
    page_size_query_param = "limit"
    max_page_size = 100
    results_key = "reports"

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response(
            {
                self.results_key: data,
                "pagination": {
                    "current": self.page.number,
                    "pages": math.ceil(total / limit) if limit else 0,
                    "total": total,
                },
            }
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "required": [self.results_key, "pagination"],
            "properties": {
                self.results_key: schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "current": {"type": "integer"},
                        "pages": {"type": "integer"},
                        "total": {"type": "integer"},
                    },
                },
            },
        }


class AdminReportPagination(ReportPagination):
    page_size = settings.ADMIN_REPORTS_PAGE_SIZE


class KPIPagination(ReportPagination):
    results_key = "kpis"
