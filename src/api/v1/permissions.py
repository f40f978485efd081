"""Role-based DRF permissions for the reporting API."""
from rest_framework.permissions import BasePermission

from accounts.models import User
from accounts.services import authorize


class IsStaffMember(BasePermission):
    """Any active account (``staff`` is the baseline role)."""

    message = "Authentication required."

    def has_permission(self, request, view):
        return authorize(request.user, User.Role.STAFF)


class IsAdminRole(BasePermission):
    """Accounts holding the ``admin`` role."""

    message = "Admin access required."

    def has_permission(self, request, view):
        return authorize(request.user, User.Role.ADMIN)


class IsReportOwner(BasePermission):
    """Object-level check: the report (or KPI) belongs to the caller."""

    message = "You do not have access to this report."

    def has_object_permission(self, request, view, obj):
        return getattr(obj, "user_id", None) == getattr(request.user, "pk", None)


class IsReportOwnerOrAdmin(IsReportOwner):
    def has_object_permission(self, request, view, obj):
        if authorize(request.user, User.Role.ADMIN):
            return True
        return super().has_object_permission(request, view, obj)
