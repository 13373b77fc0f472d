"""Admin API permissions.

The login endpoint is open to anyone; everything else under /api/admin/
requires an authenticated staff user.
"""

from rest_framework.permissions import AllowAny, BasePermission


class AllowedAnyLogin(AllowAny):
    """Login is open to anyone; AdminLoginRateThrottle bounds the attempts."""
    pass


class IsAdminStaff(BasePermission):
    """Allows access only to authenticated staff (admin) users."""

    message = "غير مصرح"

    def has_permission(self, request, view):
        return bool(
            request.user and request.user.is_authenticated and request.user.is_staff
        )
