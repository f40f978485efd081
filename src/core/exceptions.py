"""Translate API exceptions into the ``{error, details}`` envelope."""
import logging

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("hr360")


class StoreError(exceptions.APIException):
    """Persistence layer failure surfaced to API clients."""

    status_code = 500
    default_detail = "Database error"
    default_code = "store_error"


def _split_detail(data):
    """Return ``(message, extra)`` from a DRF response payload."""
    if isinstance(data, dict) and "detail" in data:
        extra = {key: value for key, value in data.items() if key not in ("detail", "code")}
        return str(data["detail"]), extra or None
    if isinstance(data, list) and data:
        return str(data[0]), data[1:] or None
    return str(data), None


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` producing ``{"error": ..., "details": ...}`` bodies.

    Unknown exceptions are left to Django (``handler500``) so they are logged
    and answered with a generic message. Under DEBUG they are answered here
    with the real message instead of the HTML technical page.
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"

    if isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or None)
    elif isinstance(exc, DatabaseError):
        logger.exception("Store error in %s", view_name)
        original = str(exc)
        exc = StoreError()
        response = exception_handler(exc, context)
        response.data = {"error": "Database error"}
        if settings.DEBUG:
            response.data["message"] = original
        return response

    response = exception_handler(exc, context)
    if response is None:
        if not settings.DEBUG:
            return None
        logger.exception("Unhandled error in %s", view_name)
        return Response(
            {"error": "Something went wrong!", "message": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"error": "Validation failed", "details": response.data}
        return response

    message, extra = _split_detail(response.data)
    body = {"error": message}
    if extra:
        body["details"] = extra
    response.data = body

    if response.status_code >= 500:
        logger.error("API error %s in %s: %s", response.status_code, view_name, message)
    return response
