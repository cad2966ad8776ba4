"""
Permission classes for the demo API.
"""
from rest_framework.permissions import BasePermission


class IsStaffUser(BasePermission):
    """Only staff or superusers (demo reset and other dev helpers)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and (user.is_staff or user.is_superuser))
