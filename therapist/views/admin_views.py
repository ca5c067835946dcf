# therapist/views/admin_views.py
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.exceptions import as_drf_validation_error
from therapist.models import AUTherapistProfile
from therapist.serializers.compliance import (
    AdminNoteSerializer,
    BulkCredentialsUpdateSerializer,
    CredentialsUpdateSerializer,
    DocumentVerificationSerializer,
    StatusChangeSerializer,
)
from therapist.serializers.therapist_profile import TherapistProfileSerializer
from therapist.services import (
    ComplianceService,
    RateCapService,
    TherapistAdminService,
)
from users.permissions import IsPlatformAdmin

logger = logging.getLogger(__name__)


class TherapistAdminViewSet(viewsets.GenericViewSet):
    """Admin operations on AU therapist profiles."""

    queryset = AUTherapistProfile.objects.select_related("user")
    serializer_class = TherapistProfileSerializer
    permission_classes = [permissions.IsAuthenticated, IsPlatformAdmin]

    def _profile_response(self, profile):
        profile.refresh_from_db()
        return Response(TherapistProfileSerializer(profile).data)

    @extend_schema(
        description="Verify or revoke verification of a compliance document",
        summary="Verify Compliance Document",
        tags=["Therapist Admin"],
        request=DocumentVerificationSerializer,
        responses={200: TherapistProfileSerializer},
    )
    @action(detail=True, methods=["post"], url_path="documents/verify")
    def verify_document(self, request, pk=None):
        profile = self.get_object()
        serializer = DocumentVerificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            if data["verified"]:
                ComplianceService.verify_document(
                    profile, data["document_type"], request.user, index=data.get("index")
                )
            else:
                ComplianceService.unverify_document(
                    profile, data["document_type"], request.user, index=data.get("index")
                )
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)
        return self._profile_response(profile)

    @extend_schema(
        description="Activate, pause or deactivate a therapist",
        summary="Change Therapist Status",
        tags=["Therapist Admin"],
        request=StatusChangeSerializer,
        responses={200: TherapistProfileSerializer},
    )
    @action(detail=True, methods=["post"], url_path="status")
    def change_status(self, request, pk=None):
        profile = self.get_object()
        serializer = StatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            TherapistAdminService.change_status(
                profile,
                serializer.validated_data["status"],
                request.user,
                serializer.validated_data["reason"],
            )
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)
        return self._profile_response(profile)

    @extend_schema(
        description="Append a note to the therapist's admin trail",
        summary="Add Admin Note",
        tags=["Therapist Admin"],
        request=AdminNoteSerializer,
    )
    @action(detail=True, methods=["post"], url_path="notes")
    def add_note(self, request, pk=None):
        profile = self.get_object()
        serializer = AdminNoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = TherapistAdminService.add_admin_note(
                profile, request.user, serializer.validated_data["note"]
            )
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)
        return Response(entry.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    @extend_schema(
        description=(
            "Change a therapist's credential type. The hourly rate is lowered "
            "to the new cap when it exceeds it."
        ),
        summary="Update Credentials",
        tags=["Therapist Admin"],
        request=CredentialsUpdateSerializer,
        responses={200: TherapistProfileSerializer},
    )
    @action(detail=True, methods=["put"], url_path="credentials")
    def update_credentials(self, request, pk=None):
        profile = self.get_object()
        serializer = CredentialsUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            RateCapService.update_credentials(
                profile, serializer.validated_data["credentials"]
            )
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)
        return self._profile_response(profile)

    @extend_schema(
        description="Change the credential type of several therapists",
        summary="Bulk Update Credentials",
        tags=["Therapist Admin"],
        request=BulkCredentialsUpdateSerializer,
        responses={
            200: {
                "type": "object",
                "properties": {
                    "total": {"type": "integer"},
                    "successful": {"type": "integer"},
                    "failed": {"type": "integer"},
                    "results": {"type": "array", "items": {"type": "object"}},
                },
            }
        },
    )
    @action(detail=False, methods=["put"], url_path="credentials/bulk")
    def bulk_update_credentials(self, request):
        serializer = BulkCredentialsUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        results = RateCapService.bulk_update_credentials(
            serializer.validated_data["therapist_ids"],
            serializer.validated_data["credentials"],
        )
        successful = sum(1 for r in results if r["success"])
        return Response(
            {
                "total": len(results),
                "successful": successful,
                "failed": len(results) - successful,
                "results": results,
            }
        )
