# users/permissions.py
from rest_framework import permissions
import logging


logger = logging.getLogger(__name__)


class IsTherapist(permissions.BasePermission):
    """
    Allow access only to users registered as therapists.
    """

    message = "Access restricted to therapists only"

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated
            and request.user.user_type == "therapist"
        )


class IsPlatformAdmin(permissions.BasePermission):
    """
    Allow access to platform admins and superusers.
    """

    message = "Access restricted to administrators only"

    def has_permission(self, request, view):
        allowed = request.user.is_authenticated and request.user.is_platform_admin
        if not allowed and request.user.is_authenticated:
            logger.debug(
                f"Admin permission denied: user={request.user.username}"
            )
        return allowed
