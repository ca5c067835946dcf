# therapist/services/admin_service.py
import logging

from django.db import transaction
from django.utils import timezone

from therapist.choices import TherapistStatus
from therapist.exceptions import InvalidStatusTransition

logger = logging.getLogger(__name__)


class TherapistAdminService:
    """Admin-driven lifecycle changes and notes on AU therapist profiles."""

    @staticmethod
    def _check_transition(profile, status):
        if not profile.can_transition_to(status):
            raise InvalidStatusTransition(profile.status, status)

    @staticmethod
    @transaction.atomic
    def activate(profile, admin=None):
        TherapistAdminService._check_transition(profile, TherapistStatus.ACTIVE)
        profile.status = TherapistStatus.ACTIVE
        profile.paused_at = None
        profile.paused_by = None
        profile.pause_reason = ""
        profile.save()
        logger.info(
            "Therapist %s activated by %s",
            profile.pk,
            getattr(admin, "pk", None),
        )
        return profile

    @staticmethod
    @transaction.atomic
    def pause(profile, admin, reason=""):
        TherapistAdminService._check_transition(profile, TherapistStatus.PAUSED)
        profile.status = TherapistStatus.PAUSED
        profile.paused_at = timezone.now()
        profile.paused_by = admin
        profile.pause_reason = reason or ""
        profile.save()
        logger.info("Therapist %s paused by %s", profile.pk, admin.pk)
        return profile

    @staticmethod
    @transaction.atomic
    def deactivate(profile, admin, reason=""):
        TherapistAdminService._check_transition(profile, TherapistStatus.INACTIVE)
        profile.status = TherapistStatus.INACTIVE
        profile.paused_at = timezone.now()
        profile.paused_by = admin
        profile.pause_reason = reason or ""
        profile.save()
        logger.info("Therapist %s deactivated by %s", profile.pk, admin.pk)
        return profile

    @staticmethod
    def change_status(profile, status, admin, reason=""):
        if status == TherapistStatus.ACTIVE:
            return TherapistAdminService.activate(profile, admin)
        if status == TherapistStatus.PAUSED:
            return TherapistAdminService.pause(profile, admin, reason)
        if status == TherapistStatus.INACTIVE:
            return TherapistAdminService.deactivate(profile, admin, reason)
        raise InvalidStatusTransition(profile.status, status)

    @staticmethod
    @transaction.atomic
    def add_admin_note(profile, admin, note):
        entry = profile.add_admin_note(note, added_by=admin)
        profile.save()
        logger.info("Admin %s added a note to therapist %s", admin.pk, profile.pk)
        return entry
