# therapist/urls.py
from django.urls import path

from therapist.views.admin_views import TherapistAdminViewSet
from therapist.views.therapist_profile_views import (
    MyTherapistProfileViewSet,
    TherapistDirectoryViewSet,
)

urlpatterns = [
    # Public directory
    path(
        "",
        TherapistDirectoryViewSet.as_view({"get": "list"}),
        name="therapist-list",
    ),
    path(
        "<int:pk>/",
        TherapistDirectoryViewSet.as_view({"get": "retrieve"}),
        name="therapist-detail",
    ),
    # Own profile
    path(
        "me/",
        MyTherapistProfileViewSet.as_view(
            {"get": "retrieve", "post": "create", "patch": "partial_update"}
        ),
        name="therapist-me",
    ),
    path(
        "me/availability/",
        MyTherapistProfileViewSet.as_view({"put": "availability"}),
        name="therapist-me-availability",
    ),
    path(
        "me/documents/",
        MyTherapistProfileViewSet.as_view({"post": "documents"}),
        name="therapist-me-documents",
    ),
    # Admin
    path(
        "<int:pk>/documents/verify/",
        TherapistAdminViewSet.as_view({"post": "verify_document"}),
        name="therapist-verify-document",
    ),
    path(
        "<int:pk>/status/",
        TherapistAdminViewSet.as_view({"post": "change_status"}),
        name="therapist-status",
    ),
    path(
        "<int:pk>/notes/",
        TherapistAdminViewSet.as_view({"post": "add_note"}),
        name="therapist-notes",
    ),
    path(
        "<int:pk>/credentials/",
        TherapistAdminViewSet.as_view({"put": "update_credentials"}),
        name="therapist-credentials",
    ),
    path(
        "credentials/bulk/",
        TherapistAdminViewSet.as_view({"put": "bulk_update_credentials"}),
        name="therapist-credentials-bulk",
    ),
]
