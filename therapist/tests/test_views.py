from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from therapist.choices import Credentials, TherapistStatus
from therapist.factories import AUTherapistProfileFactory
from therapist.models import AUTherapistProfile
from users.factories import TherapistUserFactory


@pytest.mark.django_db
class TestTherapistDirectory:
    def test_lists_only_active_profiles_best_rated_first(self, api_client):
        AUTherapistProfileFactory()  # pending
        good = AUTherapistProfileFactory(active=True, rating=4.0, total_sessions=10)
        best = AUTherapistProfileFactory(active=True, rating=4.8, total_sessions=3)
        busy = AUTherapistProfileFactory(active=True, rating=4.0, total_sessions=30)

        response = api_client.get(reverse("therapist-list"))

        assert response.status_code == status.HTTP_200_OK
        assert [t["id"] for t in response.data["results"]] == [best.id, busy.id, good.id]

    def test_public_payload_hides_compliance(self, api_client):
        profile = AUTherapistProfileFactory(active=True)
        response = api_client.get(reverse("therapist-detail", args=[profile.id]))

        assert response.status_code == status.HTTP_200_OK
        assert "compliance_documents" not in response.data
        assert "stripe_account_id" not in response.data

    def test_pending_profile_detail_is_hidden(self, api_client):
        profile = AUTherapistProfileFactory()
        response = api_client.get(reverse("therapist-detail", args=[profile.id]))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize(
        "params, expected",
        [
            ({"state": "VIC"}, ["vic"]),
            ({"specialization": "AAC"}, ["vic"]),
            ({"min_rate": "50"}, ["nsw"]),
            ({"max_rate": "50"}, ["vic", "bilingual"]),
            ({"min_rating": "4.5"}, ["nsw"]),
            ({"is_verified": "true"}, ["vic"]),
            ({"language": "fr"}, ["vic", "bilingual"]),
            ({"bilingual": "true"}, ["bilingual"]),
        ],
    )
    def test_filters(self, api_client, params, expected):
        profiles = {
            "nsw": AUTherapistProfileFactory(
                active=True,
                licensed_states=["NSW"],
                hourly_rate=Decimal("70"),
                rating=4.9,
            ),
            "vic": AUTherapistProfileFactory(
                active=True,
                licensed_states=["VIC"],
                specializations=["AAC"],
                spoken_languages=["en", "fr"],
                hourly_rate=Decimal("45"),
                rating=4.0,
                is_verified=True,
            ),
            "bilingual": AUTherapistProfileFactory(
                active=True,
                licensed_states=["QLD"],
                bilingual_therapy=True,
                hourly_rate=Decimal("40"),
                rating=3.0,
            ),
        }

        response = api_client.get(reverse("therapist-list"), params)

        assert response.status_code == status.HTTP_200_OK
        ids = [t["id"] for t in response.data["results"]]
        assert ids == [profiles[name].id for name in expected]


@pytest.mark.django_db
class TestMyTherapistProfile:
    payload = {
        "license_number": "SPA-12345",
        "licensed_states": ["NSW"],
        "specializations": ["Early Intervention"],
        "spoken_languages": ["en"],
        "hourly_rate": "65.00",
        "practice_location": {"state": "NSW", "city": "Sydney", "postcode": "2000"},
    }

    def test_clients_are_forbidden(self, auth_client):
        response = auth_client.get(reverse("therapist-me"))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_profile(self, therapist_client):
        response = therapist_client.get(reverse("therapist-me"))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_and_fetch(self, therapist_client, therapist_user):
        response = therapist_client.post(reverse("therapist-me"), self.payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["status"] == TherapistStatus.PENDING
        assert response.data["active_client_count"] == 0
        profile = AUTherapistProfile.objects.get(user=therapist_user)
        assert profile.license_number == "SPA-12345"

        response = therapist_client.get(reverse("therapist-me"))
        assert response.data["id"] == profile.id

    def test_second_profile_is_rejected(self, therapist_client, therapist_user):
        AUTherapistProfileFactory(user=therapist_user)
        response = therapist_client.post(reverse("therapist-me"), self.payload, format="json")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_rejects_rate_over_cap(self, therapist_client):
        data = dict(self.payload, hourly_rate="90.00")
        response = therapist_client.post(reverse("therapist-me"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "hourly_rate" in response.data

    def test_create_rejects_unknown_specialization(self, therapist_client):
        data = dict(self.payload, specializations=["Astrology"])
        response = therapist_client.post(reverse("therapist-me"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "specializations" in response.data

    def test_create_rejects_bad_practice_location(self, therapist_client):
        data = dict(self.payload, practice_location={"state": "NSW", "postcode": "20"})
        response = therapist_client.post(reverse("therapist-me"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "practice_location" in response.data

    def test_patch(self, therapist_client, therapist_user):
        AUTherapistProfileFactory(user=therapist_user)
        response = therapist_client.patch(
            reverse("therapist-me"), {"bio": "Paediatric specialist"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["bio"] == "Paediatric specialist"

    def test_patch_cannot_change_credentials_or_status(self, therapist_client, therapist_user):
        profile = AUTherapistProfileFactory(user=therapist_user)

        response = therapist_client.patch(
            reverse("therapist-me"), {"credentials": "SLPA"}, format="json"
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        therapist_client.patch(reverse("therapist-me"), {"status": "active"}, format="json")
        profile.refresh_from_db()
        assert profile.status == TherapistStatus.PENDING

    def test_availability(self, therapist_client, therapist_user):
        AUTherapistProfileFactory(user=therapist_user)
        url = reverse("therapist-me-availability")

        response = therapist_client.put(
            url,
            {"availability": [{"day": "Friday", "start_time": "9:00", "end_time": "13:00"}]},
            format="json",
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["availability"] == [
            {"day": "Friday", "start_time": "09:00", "end_time": "13:00"}
        ]

        response = therapist_client.put(
            url,
            {"availability": [{"day": "Friday", "start_time": "13:00", "end_time": "9:00"}]},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "availability" in response.data

    def test_submit_documents(self, therapist_client, therapist_user):
        AUTherapistProfileFactory(user=therapist_user)
        url = reverse("therapist-me-documents")

        response = therapist_client.post(
            url,
            {
                "document_type": "professional_indemnity_insurance",
                "data": {"provider": "Guild", "policy_number": "P-1"},
            },
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        summary = response.data["compliance_summary"]
        assert summary["professional_indemnity_insurance"]["present"] is True
        assert summary["professional_indemnity_insurance"]["verified"] is False

        response = therapist_client.post(
            url,
            {"document_type": "additional_credentials", "data": {"name": "Lidcombe"}},
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["compliance_documents"]["additional_credentials"][0]["name"] == "Lidcombe"

    def test_submit_unknown_document(self, therapist_client, therapist_user):
        AUTherapistProfileFactory(user=therapist_user)
        response = therapist_client.post(
            reverse("therapist-me-documents"),
            {"document_type": "passport", "data": {}},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestTherapistAdminAPI:
    def test_non_admin_is_forbidden(self, therapist_client):
        profile = AUTherapistProfileFactory()
        response = therapist_client.post(
            reverse("therapist-status", args=[profile.id]), {"status": "active"}, format="json"
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_status_changes(self, admin_client, admin_user):
        profile = AUTherapistProfileFactory()
        url = reverse("therapist-status", args=[profile.id])

        response = admin_client.post(url, {"status": "paused", "reason": "x"}, format="json")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        response = admin_client.post(url, {"status": "active"}, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "active"

        response = admin_client.post(
            url, {"status": "paused", "reason": "Documents expired"}, format="json"
        )
        assert response.data["status"] == "paused"
        assert response.data["pause_reason"] == "Documents expired"

    def test_verify_document(self, admin_client, admin_user):
        profile = AUTherapistProfileFactory(
            compliance_documents={"police_check": {"check_number": "PC-1"}}
        )
        url = reverse("therapist-verify-document", args=[profile.id])

        response = admin_client.post(url, {"document_type": "police_check"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        verification = response.data["compliance_documents"]["police_check"]["verification"]
        assert verification["status"] == "verified"
        assert verification["verified_by"] == admin_user.pk

        response = admin_client.post(
            url, {"document_type": "police_check", "verified": False}, format="json"
        )
        verification = response.data["compliance_documents"]["police_check"]["verification"]
        assert verification == {"status": "unverified"}

    def test_verify_list_document_needs_index(self, admin_client):
        profile = AUTherapistProfileFactory()
        response = admin_client.post(
            reverse("therapist-verify-document", args=[profile.id]),
            {"document_type": "academic_qualifications"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_add_note(self, admin_client, admin_user):
        profile = AUTherapistProfileFactory()
        response = admin_client.post(
            reverse("therapist-notes", args=[profile.id]),
            {"note": "Requested updated police check"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["added_by"] == admin_user.pk
        profile.refresh_from_db()
        assert len(profile.admin_notes) == 1

    def test_update_credentials(self, admin_client):
        profile = AUTherapistProfileFactory(hourly_rate=Decimal("72"))
        response = admin_client.put(
            reverse("therapist-credentials", args=[profile.id]),
            {"credentials": "SLPA"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["credentials"] == Credentials.SLPA
        assert Decimal(response.data["hourly_rate"]) == Decimal("55")

    def test_update_credentials_rejects_unknown_type(self, admin_client):
        profile = AUTherapistProfileFactory()
        response = admin_client.put(
            reverse("therapist-credentials", args=[profile.id]),
            {"credentials": "OT"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_bulk_update_credentials(self, admin_client):
        profiles = [
            AUTherapistProfileFactory(user=TherapistUserFactory(), hourly_rate=Decimal("60"))
            for _ in range(2)
        ]
        response = admin_client.put(
            reverse("therapist-credentials-bulk"),
            {"therapist_ids": [p.id for p in profiles] + [999999], "credentials": "SLPA"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["total"] == 3
        assert response.data["successful"] == 2
        assert response.data["failed"] == 1
