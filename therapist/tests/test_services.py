from decimal import Decimal
from io import StringIO

import pytest
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.utils import timezone

from therapist.choices import Credentials, TherapistStatus
from therapist.exceptions import InvalidStatusTransition, UnknownComplianceDocument
from therapist.factories import AUTherapistProfileFactory, TherapistProfileFactory
from therapist.models import AUTherapistProfile
from therapist.services import ComplianceService, RateCapService, TherapistAdminService


@pytest.mark.django_db
class TestTherapistAdminService:
    def test_activate_pending_profile(self, admin_user):
        profile = AUTherapistProfileFactory()
        TherapistAdminService.activate(profile, admin_user)

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.ACTIVE

    def test_pause_records_who_and_why(self, admin_user):
        profile = AUTherapistProfileFactory(active=True)
        TherapistAdminService.pause(profile, admin_user, "Insurance expired")

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.PAUSED
        assert profile.paused_by == admin_user
        assert profile.paused_at is not None
        assert profile.pause_reason == "Insurance expired"

    def test_reactivation_clears_pause_details(self, admin_user):
        profile = AUTherapistProfileFactory(active=True)
        TherapistAdminService.pause(profile, admin_user, "Leave")
        TherapistAdminService.activate(profile, admin_user)

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.ACTIVE
        assert profile.paused_at is None
        assert profile.paused_by is None
        assert profile.pause_reason == ""

    def test_deactivate(self, admin_user):
        profile = AUTherapistProfileFactory(active=True)
        TherapistAdminService.deactivate(profile, admin_user, "Left the platform")

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.INACTIVE
        assert profile.paused_by == admin_user

    def test_pausing_pending_profile_is_rejected(self, admin_user):
        profile = AUTherapistProfileFactory()

        with pytest.raises(InvalidStatusTransition) as exc:
            TherapistAdminService.pause(profile, admin_user, "Too early")
        assert exc.value.current == TherapistStatus.PENDING
        assert exc.value.requested == TherapistStatus.PAUSED

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.PENDING

    def test_change_status_dispatches(self, admin_user):
        profile = AUTherapistProfileFactory()
        TherapistAdminService.change_status(profile, "active", admin_user)
        TherapistAdminService.change_status(profile, "paused", admin_user, "Review")

        profile.refresh_from_db()
        assert profile.status == TherapistStatus.PAUSED

    def test_add_admin_note(self, admin_user):
        profile = AUTherapistProfileFactory()
        TherapistAdminService.add_admin_note(profile, admin_user, "Called about WWCC")

        profile.refresh_from_db()
        assert profile.admin_notes[-1]["note"] == "Called about WWCC"
        assert profile.admin_notes[-1]["added_by"] == admin_user.pk


@pytest.mark.django_db
class TestComplianceService:
    def test_update_document_creates_unverified(self):
        profile = AUTherapistProfileFactory()
        ComplianceService.update_document(
            profile,
            "working_with_children_check",
            {"check_number": "WWC-1", "state": "NSW", "expiration_date": "2031-01-01"},
        )

        profile.refresh_from_db()
        document = profile.compliance_documents["working_with_children_check"]
        assert document["check_number"] == "WWC-1"
        assert document["verification"] == {"status": "unverified"}

    def test_verification_cannot_be_self_declared(self):
        profile = AUTherapistProfileFactory()
        ComplianceService.update_document(
            profile,
            "police_check",
            {"check_number": "PC-1", "verified": True, "verified_by": 1},
        )
        assert profile.get_compliance().police_check.is_verified is False

    def test_verify_then_change_resets_verification(self, admin_user):
        profile = AUTherapistProfileFactory()
        ComplianceService.update_document(profile, "police_check", {"check_number": "PC-1"})
        ComplianceService.verify_document(profile, "police_check", admin_user)

        document = profile.get_compliance().police_check
        assert document.is_verified
        assert document.verification.verified_by == admin_user.pk

        # Re-submitting identical details keeps the verification.
        ComplianceService.update_document(profile, "police_check", {"check_number": "PC-1"})
        assert profile.get_compliance().police_check.is_verified

        ComplianceService.update_document(profile, "police_check", {"check_number": "PC-2"})
        assert not profile.get_compliance().police_check.is_verified

    def test_list_documents(self, admin_user):
        profile = AUTherapistProfileFactory()
        ComplianceService.add_document(
            profile, "academic_qualifications", {"degree": "BSpPath", "year": 2015}
        )
        ComplianceService.add_document(
            profile, "academic_qualifications", {"degree": "MSpPath", "year": 2018}
        )
        ComplianceService.verify_document(
            profile, "academic_qualifications", admin_user, index=1
        )

        qualifications = profile.get_compliance().academic_qualifications
        assert [q.degree for q in qualifications] == ["BSpPath", "MSpPath"]
        assert [q.is_verified for q in qualifications] == [False, True]

        ComplianceService.remove_document(profile, "academic_qualifications", index=0)
        profile.refresh_from_db()
        assert len(profile.compliance_documents["academic_qualifications"]) == 1

    def test_unverify(self, admin_user):
        profile = AUTherapistProfileFactory()
        ComplianceService.update_document(profile, "spa_membership", {"membership_number": "1"})
        ComplianceService.verify_document(profile, "spa_membership", admin_user)
        ComplianceService.unverify_document(profile, "spa_membership", admin_user)

        assert not profile.get_compliance().spa_membership.is_verified

    def test_unknown_document(self, admin_user):
        profile = AUTherapistProfileFactory()
        with pytest.raises(UnknownComplianceDocument):
            ComplianceService.update_document(profile, "passport", {})
        with pytest.raises(UnknownComplianceDocument):
            ComplianceService.verify_document(profile, "passport", admin_user)

    def test_verifying_missing_document(self, admin_user):
        profile = AUTherapistProfileFactory()
        with pytest.raises(ValidationError):
            ComplianceService.verify_document(profile, "police_check", admin_user)
        with pytest.raises(ValidationError):
            ComplianceService.verify_document(
                profile, "academic_qualifications", admin_user, index=0
            )

    def test_invalid_document_data(self):
        profile = AUTherapistProfileFactory()
        with pytest.raises(ValidationError) as exc:
            ComplianceService.update_document(
                profile, "state_registration", {"state": "Texas"}
            )
        assert "state_registration" in exc.value.message_dict


@pytest.mark.django_db
class TestRateCapService:
    def test_caps_follow_settings(self, settings):
        settings.THERAPIST_RATE_CAPS = {"SLP": 80, "SLPA": 50}
        assert RateCapService.get_rate_cap("SLP") == Decimal("80")
        assert RateCapService.get_rate_cap("SLPA") == Decimal("50")

    def test_validate_rate(self):
        RateCapService.validate_rate(Decimal("75"), "SLP")
        with pytest.raises(ValidationError):
            RateCapService.validate_rate(Decimal("56"), "SLPA")

    def test_downgrade_caps_rate_and_supervision(self):
        profile = AUTherapistProfileFactory(hourly_rate=Decimal("70"), can_supervise=True)
        RateCapService.update_credentials(profile, Credentials.SLPA)

        profile.refresh_from_db()
        assert profile.credentials == Credentials.SLPA
        assert profile.hourly_rate == Decimal("55")
        assert profile.can_supervise is False

    def test_rate_below_cap_is_kept(self):
        profile = AUTherapistProfileFactory(hourly_rate=Decimal("40"))
        RateCapService.update_credentials(profile, Credentials.SLPA)

        profile.refresh_from_db()
        assert profile.hourly_rate == Decimal("40")

    def test_invalid_credentials(self):
        profile = AUTherapistProfileFactory()
        with pytest.raises(ValidationError):
            RateCapService.update_credentials(profile, "PhD")

    def test_bulk_update_reports_per_profile(self):
        first = AUTherapistProfileFactory(hourly_rate=Decimal("70"))
        second = AUTherapistProfileFactory(hourly_rate=Decimal("50"))

        results = RateCapService.bulk_update_credentials(
            [first.pk, second.pk, 999999], Credentials.SLPA
        )

        assert [r["success"] for r in results] == [True, True, False]
        assert results[2] == {"id": 999999, "success": False, "message": "Therapist not found"}
        first.refresh_from_db()
        assert first.hourly_rate == Decimal("55")

    def test_fix_therapist_rates_command(self):
        us = TherapistProfileFactory(hourly_rate=Decimal("90"))
        au = AUTherapistProfileFactory(credentials=Credentials.SLPA, hourly_rate=Decimal("60"))
        fine = AUTherapistProfileFactory(hourly_rate=Decimal("75"))

        call_command("fix_therapist_rates")

        for profile in (us, au, fine):
            profile.refresh_from_db()
        assert us.hourly_rate == Decimal("75")
        assert au.hourly_rate == Decimal("55")
        assert fine.hourly_rate == Decimal("75")

    def test_fix_therapist_rates_skips_invalid_rows(self):
        broken = AUTherapistProfileFactory(hourly_rate=Decimal("90"))
        AUTherapistProfile.objects.filter(pk=broken.pk).update(paused_at=timezone.now())
        other = AUTherapistProfileFactory(hourly_rate=Decimal("80"))
        out = StringIO()

        call_command("fix_therapist_rates", stdout=out)

        broken.refresh_from_db()
        other.refresh_from_db()
        assert broken.hourly_rate == Decimal("90")
        assert other.hourly_rate == Decimal("75")
        assert "Fixed 1 therapist rates" in out.getvalue()
