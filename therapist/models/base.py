# therapist/models/base.py
import logging
from django.db import models
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator
from django.core.exceptions import ValidationError

from core.schemas import validate_documents
from therapist.choices import Credentials, Language, Specialization
from therapist.documents import (
    AvailabilityWindow,
    CertificationEntry,
    EducationEntry,
    WorkExperienceEntry,
)
from therapist.validators import (
    ChoiceListValidator,
    FiniteNumberValidator,
    StringListValidator,
)

logger = logging.getLogger(__name__)


class BaseTherapistProfile(models.Model):
    """Fields shared by every market's therapist profile."""

    # Credentials
    license_number = models.CharField(
        max_length=100,
        error_messages={"blank": "License number is required"},
    )
    licensed_states = models.JSONField(
        default=list, blank=True, validators=[StringListValidator()]
    )
    specializations = models.JSONField(
        default=list,
        blank=True,
        validators=[ChoiceListValidator(Specialization.values)],
    )
    credentials = models.CharField(
        max_length=4, choices=Credentials.choices, default=Credentials.SLP
    )
    spoken_languages = models.JSONField(
        default=list,
        blank=True,
        validators=[ChoiceListValidator(Language.values)],
    )
    bilingual_therapy = models.BooleanField(default=False)

    # Profile
    bio = models.TextField(
        blank=True,
        max_length=2000,
        validators=[MaxLengthValidator(2000, message="Bio cannot exceed 2000 characters")],
    )
    location = models.CharField(max_length=255, blank=True)
    education = models.JSONField(default=list, blank=True)
    certifications = models.JSONField(default=list, blank=True)
    work_experience = models.JSONField(default=list, blank=True)
    experience = models.PositiveIntegerField(
        default=0, validators=[MinValueValidator(0)], help_text="Years of experience"
    )
    hourly_rate = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(0, message="Hourly rate must be positive")],
        error_messages={"null": "Hourly rate is required"},
    )

    # Scheduling
    availability = models.JSONField(
        default=list, blank=True, help_text="Weekly availability windows"
    )

    # Aggregates
    rating = models.FloatField(
        default=0.0,
        validators=[
            FiniteNumberValidator(),
            MinValueValidator(0.0),
            MaxValueValidator(5.0),
        ],
    )
    total_reviews = models.PositiveIntegerField(default=0)
    total_sessions = models.PositiveIntegerField(default=0)

    # Flags
    is_verified = models.BooleanField(default=False)
    stripe_account_id = models.CharField(max_length=255, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    EMBEDDED_LISTS = {
        "education": EducationEntry,
        "certifications": CertificationEntry,
        "work_experience": WorkExperienceEntry,
        "availability": AvailabilityWindow,
    }

    class Meta:
        abstract = True
        ordering = ["-rating", "-total_sessions"]

    def __str__(self):
        return f"{self.user.username}'s therapist profile"

    def clean_fields(self, exclude=None):
        self.license_number = (self.license_number or "").strip()
        self.location = (self.location or "").strip()
        super().clean_fields(exclude=exclude)

    def collect_errors(self):
        """Validate and normalise the embedded entry lists."""
        errors = {}
        for field_name, schema in self.EMBEDDED_LISTS.items():
            try:
                setattr(
                    self,
                    field_name,
                    validate_documents(schema, getattr(self, field_name)),
                )
            except ValidationError as e:
                errors[field_name] = e.messages
        return errors

    def clean(self):
        super().clean()
        errors = self.collect_errors()
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def active_client_count(self):
        if self.pk is None:
            return 0
        return self.active_clients.count()

    def get_availability(self):
        return [AvailabilityWindow.model_validate(w) for w in self.availability or []]

    def is_available(self, at, duration=60):
        """True if a session of ``duration`` minutes at ``at`` fits a window."""
        return any(window.covers(at, duration) for window in self.get_availability())
