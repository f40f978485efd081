"""Project-level views: health check and JSON error handlers."""
import logging

from django.http import JsonResponse
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger("hr360")


@api_view(["GET"])
@permission_classes([AllowAny])
def health(request):
    return Response({"status": "OK", "timestamp": timezone.now().isoformat()})


def route_not_found(request, exception=None):
    """``handler404``: unmatched routes answer with JSON instead of HTML."""
    return JsonResponse({"error": "Route not found"}, status=404)


def server_error(request):
    """``handler500``: the traceback is logged by ``django.request``."""
    logger.error("Unhandled server error on %s %s", request.method, request.path)
    return JsonResponse(
        {"error": "Something went wrong!", "message": "Internal server error"},
        status=500,
    )
