# therapist/serializers/therapist_profile.py
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from core.exceptions import as_drf_validation_error
from therapist.choices import Credentials
from therapist.models import AUTherapistProfile
from therapist.services import RateCapService


class TherapistProfileSerializer(serializers.ModelSerializer):
    """The therapist's own view of their AU profile."""

    user = serializers.PrimaryKeyRelatedField(read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    first_name = serializers.CharField(source="user.first_name", read_only=True)
    last_name = serializers.CharField(source="user.last_name", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    active_client_count = serializers.IntegerField(read_only=True)
    compliance_summary = serializers.SerializerMethodField()

    class Meta:
        model = AUTherapistProfile
        fields = [
            "id",
            "user",
            "username",
            "first_name",
            "last_name",
            "email",
            "license_number",
            "licensed_states",
            "specializations",
            "credentials",
            "spoken_languages",
            "bilingual_therapy",
            "bio",
            "location",
            "education",
            "certifications",
            "work_experience",
            "experience",
            "hourly_rate",
            "availability",
            "rating",
            "total_reviews",
            "total_sessions",
            "active_client_count",
            "is_verified",
            "stripe_account_id",
            "practice_location",
            "status",
            "can_supervise",
            "compliance_documents",
            "compliance_summary",
            "paused_at",
            "pause_reason",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "rating",
            "total_reviews",
            "total_sessions",
            "is_verified",
            "stripe_account_id",
            "status",
            "compliance_documents",
            "paused_at",
            "pause_reason",
            "created_at",
            "updated_at",
        ]

    def get_compliance_summary(self, obj):
        return obj.compliance_summary()

    def validate(self, attrs):
        instance = self.instance
        if (
            instance is not None
            and "credentials" in attrs
            and attrs["credentials"] != instance.credentials
        ):
            raise serializers.ValidationError(
                {"credentials": "Credentials can only be changed by an administrator"}
            )

        credentials = attrs.get(
            "credentials", instance.credentials if instance else Credentials.SLP
        )
        hourly_rate = attrs.get(
            "hourly_rate", instance.hourly_rate if instance else None
        )
        try:
            RateCapService.validate_rate(hourly_rate, credentials)
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)
        return attrs

    def save(self, **kwargs):
        try:
            return super().save(**kwargs)
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)


class TherapistProfilePublicSerializer(serializers.ModelSerializer):
    """Directory listing; no compliance or payout details."""

    first_name = serializers.CharField(source="user.first_name", read_only=True)
    last_name = serializers.CharField(source="user.last_name", read_only=True)
    active_client_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = AUTherapistProfile
        fields = [
            "id",
            "first_name",
            "last_name",
            "licensed_states",
            "specializations",
            "credentials",
            "spoken_languages",
            "bilingual_therapy",
            "bio",
            "location",
            "practice_location",
            "education",
            "certifications",
            "experience",
            "hourly_rate",
            "availability",
            "rating",
            "total_reviews",
            "total_sessions",
            "active_client_count",
            "is_verified",
        ]
        read_only_fields = fields


class TherapistAvailabilitySerializer(serializers.Serializer):
    availability = serializers.ListField(
        child=serializers.DictField(), allow_empty=True
    )
