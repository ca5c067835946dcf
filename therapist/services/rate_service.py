# therapist/services/rate_service.py
import logging
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from therapist.choices import Credentials
from therapist.models import AUTherapistProfile, TherapistProfile

logger = logging.getLogger(__name__)


class RateCapService:
    """Keeps hourly rates within the cap for each credential type"""

    @staticmethod
    def get_rate_cap(credentials):
        caps = settings.THERAPIST_RATE_CAPS
        return Decimal(caps.get(credentials, caps[Credentials.SLP]))

    @staticmethod
    def validate_rate(hourly_rate, credentials):
        cap = RateCapService.get_rate_cap(credentials)
        if hourly_rate is not None and Decimal(hourly_rate) > cap:
            raise ValidationError(
                {"hourly_rate": f"Hourly rate for {credentials} cannot exceed ${cap}"}
            )

    @staticmethod
    def _apply_credentials(profile, credentials):
        if credentials not in Credentials.values:
            raise ValidationError(
                {"credentials": 'Credentials must be either "SLP" or "SLPA"'}
            )
        cap = RateCapService.get_rate_cap(credentials)
        if profile.hourly_rate is not None and profile.hourly_rate > cap:
            logger.info(
                "Capping therapist %s rate %s -> %s", profile.pk, profile.hourly_rate, cap
            )
            profile.hourly_rate = cap
        if credentials == Credentials.SLPA and getattr(profile, "can_supervise", False):
            profile.can_supervise = False
        profile.credentials = credentials

    @staticmethod
    @transaction.atomic
    def update_credentials(profile, credentials):
        """Change a therapist's credential type, capping the rate if needed."""
        RateCapService._apply_credentials(profile, credentials)
        profile.save()
        logger.info("Therapist %s credentials updated to %s", profile.pk, credentials)
        return profile

    @staticmethod
    def bulk_update_credentials(profile_ids, credentials, model=AUTherapistProfile):
        """
        Update credentials for many profiles.

        Each profile is updated independently; returns one result dict per id
        with ``id``, ``success`` and ``message``.
        """
        if credentials not in Credentials.values:
            raise ValidationError(
                {"credentials": 'Credentials must be either "SLP" or "SLPA"'}
            )

        results = []
        for profile_id in profile_ids:
            try:
                profile = model.objects.get(pk=profile_id)
            except model.DoesNotExist:
                results.append(
                    {"id": profile_id, "success": False, "message": "Therapist not found"}
                )
                continue
            try:
                RateCapService.update_credentials(profile, credentials)
            except ValidationError as e:
                logger.warning("Credential update failed for therapist %s: %s", profile_id, e)
                results.append(
                    {"id": profile_id, "success": False, "message": "; ".join(e.messages)}
                )
                continue
            results.append({"id": profile_id, "success": True, "message": "Updated successfully"})

        logger.info(
            "Bulk credential update to %s: %s of %s succeeded",
            credentials,
            sum(1 for r in results if r["success"]),
            len(results),
        )
        return results

    @staticmethod
    def cap_all_rates(models=(TherapistProfile, AUTherapistProfile)):
        """
        Lower every stored rate above its credential cap; returns the number fixed.

        A row that fails validation for other reasons is logged and left as is.
        """
        fixed = 0
        for model in models:
            for credentials in Credentials.values:
                cap = RateCapService.get_rate_cap(credentials)
                for profile in model.objects.filter(
                    credentials=credentials, hourly_rate__gt=cap
                ):
                    logger.info(
                        "Fixing %s %s: %s rate %s -> %s",
                        model.__name__,
                        profile.pk,
                        credentials,
                        profile.hourly_rate,
                        cap,
                    )
                    profile.hourly_rate = cap
                    try:
                        with transaction.atomic():
                            profile.save()
                    except ValidationError as e:
                        logger.warning(
                            "Skipping %s %s: %s", model.__name__, profile.pk, e.messages
                        )
                        continue
                    fixed += 1
        return fixed
