"""URL configuration for the HR360 weekly reporting backend."""
from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path

from core.views import route_not_found

urlpatterns = [
    # API
    path("api/v1/", include("api.urls")),
]

if getattr(settings, "ENABLE_DJANGO_ADMIN", False):
    urlpatterns.insert(0, path("admin/", admin.site.urls))

# Must stay last: answers unmatched paths with JSON even when DEBUG is on.
urlpatterns.append(re_path(r"^.*$", route_not_found))

handler404 = "core.views.route_not_found"
handler500 = "core.views.server_error"
