from rest_framework import permissions


class IsModerator(permissions.BasePermission):
    """Authenticated users with the MODERATOR role."""

    message = "Moderator role required"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_moderator", False))
