from rest_framework import permissions

from .models import is_admin_user


class IsAdminRole(permissions.BasePermission):
    """Allows access only to users with the admin role."""

    message = "Unauthorized action"

    def has_permission(self, request, view):
        return is_admin_user(request.user)


class AdminRoleCanDelete(permissions.BasePermission):
    """
    Any authenticated user may read and write; DELETE requires the admin role.
    """

    message = "Unauthorized action"

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if request.method == "DELETE":
            return is_admin_user(request.user)
        return True


class PublicReadAdminDelete(AdminRoleCanDelete):
    """
    Like AdminRoleCanDelete, but anonymous visitors may browse (safe methods).
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
