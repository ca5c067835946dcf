# therapist/models/therapist_profile.py
from django.conf import settings
from django.db import models

from .base import BaseTherapistProfile


class TherapistProfile(BaseTherapistProfile):
    """Therapist profile for the US market."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="therapist_profile",
    )
    active_clients = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="us_therapists",
        limit_choices_to={"user_type": "client"},
    )

    class Meta(BaseTherapistProfile.Meta):
        verbose_name = "Therapist Profile (US)"
        verbose_name_plural = "Therapist Profiles (US)"
        indexes = [
            models.Index(fields=["licensed_states"], name="ther_us_states_idx"),
            models.Index(fields=["specializations"], name="ther_us_spec_idx"),
            models.Index(fields=["-rating"], name="ther_us_rating_idx"),
            models.Index(fields=["is_verified"], name="ther_us_verified_idx"),
            models.Index(fields=["credentials"], name="ther_us_cred_idx"),
        ]
