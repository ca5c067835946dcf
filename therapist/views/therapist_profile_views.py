# therapist/views/therapist_profile_views.py
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.http import Http404
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.exceptions import as_drf_validation_error
from therapist.choices import TherapistStatus
from therapist.documents import LIST_DOCUMENTS
from therapist.filters import TherapistFilter
from therapist.models import AUTherapistProfile
from therapist.permissions import IsProfileOwner
from therapist.serializers.compliance import ComplianceDocumentUploadSerializer
from therapist.serializers.therapist_profile import (
    TherapistAvailabilitySerializer,
    TherapistProfilePublicSerializer,
    TherapistProfileSerializer,
)
from therapist.services import ComplianceService
from users.permissions import IsTherapist

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        description="Browse active therapists, best rated first",
        summary="Therapist Directory",
        tags=["Therapists"],
    ),
    retrieve=extend_schema(
        description="Public details of an active therapist",
        summary="Therapist Details",
        tags=["Therapists"],
    ),
)
class TherapistDirectoryViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TherapistProfilePublicSerializer
    permission_classes = [permissions.AllowAny]
    filterset_class = TherapistFilter

    def get_queryset(self):
        return (
            AUTherapistProfile.objects.select_related("user")
            .filter(status=TherapistStatus.ACTIVE)
            .order_by("-rating", "-total_sessions")
        )


class MyTherapistProfileViewSet(
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """The signed-in therapist's own profile, addressed as /me/."""

    serializer_class = TherapistProfileSerializer
    permission_classes = [permissions.IsAuthenticated, IsTherapist, IsProfileOwner]
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):
        return AUTherapistProfile.objects.select_related("user").filter(
            user=self.request.user
        )

    def get_object(self):
        profile = self.get_queryset().first()
        if profile is None:
            raise Http404("Therapist profile not found")
        self.check_object_permissions(self.request, profile)
        return profile

    @extend_schema(
        description="Get the signed-in therapist's profile",
        summary="Get My Profile",
        tags=["Therapist Profile"],
    )
    def retrieve(self, request, *args, **kwargs):
        return super().retrieve(request, *args, **kwargs)

    @extend_schema(
        description="Create a therapist profile for the signed-in therapist",
        summary="Create My Profile",
        tags=["Therapist Profile"],
    )
    def create(self, request, *args, **kwargs):
        if self.get_queryset().exists():
            return Response(
                {"error": "Profile already exists for this user"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        with transaction.atomic():
            serializer.save(user=self.request.user)
        logger.info("Created therapist profile for user %s", self.request.user.username)

    @extend_schema(
        description="Update the signed-in therapist's profile",
        summary="Update My Profile",
        tags=["Therapist Profile"],
    )
    def partial_update(self, request, *args, **kwargs):
        return super().partial_update(request, *args, **kwargs)

    @extend_schema(
        description="Replace the weekly availability windows",
        summary="Update Availability",
        tags=["Therapist Profile"],
        request=TherapistAvailabilitySerializer,
        responses={200: TherapistAvailabilitySerializer},
    )
    @action(detail=False, methods=["put"], url_path="availability")
    def availability(self, request):
        profile = self.get_object()
        serializer = TherapistAvailabilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        profile.availability = serializer.validated_data["availability"]
        try:
            profile.save()
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)

        logger.info("Therapist %s updated availability", profile.pk)
        return Response({"availability": profile.availability})

    @extend_schema(
        description=(
            "Submit metadata for a compliance document. Changing a document "
            "resets it to unverified."
        ),
        summary="Submit Compliance Document",
        tags=["Therapist Profile"],
        request=ComplianceDocumentUploadSerializer,
    )
    @action(detail=False, methods=["post"], url_path="documents")
    def documents(self, request):
        profile = self.get_object()
        serializer = ComplianceDocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        key = serializer.validated_data["document_type"]
        data = serializer.validated_data["data"]

        try:
            if key in LIST_DOCUMENTS:
                ComplianceService.add_document(profile, key, data)
            else:
                ComplianceService.update_document(profile, key, data)
        except DjangoValidationError as e:
            raise as_drf_validation_error(e)

        profile.refresh_from_db()
        return Response(
            {
                "compliance_documents": profile.compliance_documents,
                "compliance_summary": profile.compliance_summary(),
            },
            status=status.HTTP_201_CREATED,
        )
