# therapist/models/au_therapist_profile.py
import logging
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from model_utils import FieldTracker

from core.schemas import validate_document, validate_documents
from therapist.choices import Credentials, TherapistStatus
from therapist.documents import (
    LEGACY_DOCUMENTS,
    SINGLE_DOCUMENTS,
    AdminNote,
    ComplianceDocuments,
    PracticeLocation,
)
from .base import BaseTherapistProfile

logger = logging.getLogger(__name__)


class AUTherapistProfile(BaseTherapistProfile):
    """
    Therapist profile for the Australian market.

    Extends the shared profile with practice location, lifecycle status,
    supervision capability, the compliance document bundle and the admin trail.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="au_therapist_profile",
    )
    active_clients = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="au_therapists",
        limit_choices_to={"user_type": "client"},
    )

    practice_location = models.JSONField(default=dict, blank=True)
    status = models.CharField(
        max_length=10,
        choices=TherapistStatus.choices,
        default=TherapistStatus.PENDING,
    )
    can_supervise = models.BooleanField(
        default=False,
        help_text="Indicates if this SLP can supervise SLPA assistants",
    )
    compliance_documents = models.JSONField(default=dict, blank=True)

    # Admin trail
    admin_notes = models.JSONField(default=list, blank=True)
    paused_at = models.DateTimeField(null=True, blank=True)
    paused_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="+",
    )
    pause_reason = models.TextField(blank=True)

    tracker = FieldTracker(["status"])

    class Meta(BaseTherapistProfile.Meta):
        verbose_name = "Therapist Profile (AU)"
        verbose_name_plural = "Therapist Profiles (AU)"
        indexes = [
            models.Index(fields=["licensed_states"], name="ther_au_states_idx"),
            models.Index(fields=["specializations"], name="ther_au_spec_idx"),
            models.Index(fields=["-rating"], name="ther_au_rating_idx"),
            models.Index(fields=["is_verified"], name="ther_au_verified_idx"),
            models.Index(fields=["status"], name="ther_au_status_idx"),
            models.Index(fields=["credentials"], name="ther_au_cred_idx"),
        ]

    @staticmethod
    def allowed_transitions(status):
        return settings.THERAPIST_STATUS_TRANSITIONS.get(status, [])

    def can_transition_to(self, status):
        return status == self.status or status in self.allowed_transitions(self.status)

    def collect_errors(self):
        errors = super().collect_errors()

        try:
            self.practice_location = (
                validate_document(
                    PracticeLocation, self.practice_location or {}, exclude_none=True
                )
            )
        except ValidationError as e:
            errors["practice_location"] = e.messages

        try:
            self.compliance_documents = validate_document(
                ComplianceDocuments, self.compliance_documents or {}, exclude_none=True
            )
        except ValidationError as e:
            errors["compliance_documents"] = e.messages

        try:
            self.admin_notes = validate_documents(AdminNote, self.admin_notes)
        except ValidationError as e:
            errors["admin_notes"] = e.messages

        if (self.paused_at is None) != (self.paused_by_id is None):
            errors["paused_by"] = "paused_at and paused_by must be set together"
        elif self.status == TherapistStatus.PAUSED and self.paused_at is None:
            errors["status"] = "A paused therapist needs paused_at and paused_by"
        elif (
            self.status in (TherapistStatus.ACTIVE, TherapistStatus.PENDING)
            and self.paused_at is not None
        ):
            errors["paused_at"] = f"A {self.status} therapist cannot carry pause details"

        if self.can_supervise and self.credentials == Credentials.SLPA:
            errors["can_supervise"] = "Only SLP therapists can supervise assistants"

        previous = self.tracker.previous("status")
        if (
            self.pk is not None
            and previous is not None
            and self.tracker.has_changed("status")
            and self.status not in self.allowed_transitions(previous)
        ):
            errors["status"] = f"Cannot move therapist from '{previous}' to '{self.status}'"

        return errors

    def save(self, *args, **kwargs):
        previous = self.tracker.previous("status")
        changed = self.pk is not None and self.tracker.has_changed("status")
        super().save(*args, **kwargs)
        if changed:
            logger.info(
                "Therapist %s status changed from %s to %s",
                self.pk,
                previous,
                self.status,
            )

    def get_compliance(self):
        return ComplianceDocuments.model_validate(self.compliance_documents or {})

    def set_compliance(self, bundle):
        self.compliance_documents = bundle.model_dump(mode="json", exclude_none=True)

    def add_admin_note(self, note, added_by=None):
        entry = AdminNote(note=note, added_by=getattr(added_by, "pk", added_by))
        self.admin_notes = list(self.admin_notes or []) + [entry.model_dump(mode="json")]
        return entry

    def compliance_summary(self, on=None):
        """Per-document presence, verification and expiry flags."""
        bundle = self.get_compliance()
        summary = {
            key: {"present": False, "verified": False, "expired": False, "expiration_date": None}
            for key in SINGLE_DOCUMENTS
            if key not in LEGACY_DOCUMENTS
        }
        for key, index, document in bundle.iter_documents():
            label = key if index is None else f"{key}[{index}]"
            summary[label] = {
                "present": True,
                "verified": document.is_verified,
                "expired": document.is_expired(on),
                "expiration_date": document.expiration_date,
            }
        return summary
