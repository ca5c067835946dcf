# therapist/permissions.py
from rest_framework import permissions


class IsProfileOwner(permissions.BasePermission):
    """Therapists can only touch their own profile; platform admins can touch any."""

    message = "You can only manage your own therapist profile"

    def has_object_permission(self, request, view, obj):
        user = request.user
        if user.is_platform_admin:
            return True
        return obj.user_id == user.id
