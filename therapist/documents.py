# therapist/documents.py
"""
Shapes of the sub-documents embedded in therapist profiles.

Profile entries (education, work history, availability, admin notes, ...) and
the AU compliance bundle are stored in JSON columns. These schemas validate and
normalise them before the row is written.
"""
from datetime import date, datetime, time, timedelta
from typing import Annotated, List, Literal, Optional, Union

from django.utils import timezone
from pydantic import Field, field_validator, model_validator

from core.schemas import EmbeddedSchema
from .choices import AUState, Weekday


# ======================
# Profile entries
# ======================
class EducationEntry(EmbeddedSchema):
    degree: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1900, le=2100)


class CertificationEntry(EmbeddedSchema):
    name: Optional[str] = None
    issuer: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1900, le=2100)


class WorkExperienceEntry(EmbeddedSchema):
    position: Optional[str] = None
    company: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class AvailabilityWindow(EmbeddedSchema):
    day: Weekday
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time_format(cls, value):
        try:
            parsed = datetime.strptime(value, "%H:%M")
        except ValueError:
            raise ValueError("Invalid time format. Use HH:MM format")
        return parsed.strftime("%H:%M")

    @model_validator(mode="after")
    def check_order(self):
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self

    def covers(self, at: datetime, duration_minutes: int = 60) -> bool:
        """True if a session starting at ``at`` fits inside this window."""
        if at.strftime("%A") != self.day:
            return False
        start = time.fromisoformat(self.start_time)
        end = time.fromisoformat(self.end_time)
        finish = (at + timedelta(minutes=duration_minutes)).time()
        return start <= at.time() and finish <= end and finish > at.time()


class PracticeLocation(EmbeddedSchema):
    state: Optional[AUState] = None
    city: Optional[str] = None
    postcode: Optional[str] = Field(default=None, pattern=r"^\d{4}$")


class AdminNote(EmbeddedSchema):
    note: str = Field(min_length=1)
    added_by: Optional[int] = None
    added_at: datetime = Field(default_factory=timezone.now)


# ======================
# Compliance documents
# ======================
class Unverified(EmbeddedSchema):
    status: Literal["unverified"] = "unverified"


class Verified(EmbeddedSchema):
    status: Literal["verified"] = "verified"
    verified_at: datetime
    verified_by: int


Verification = Annotated[Union[Unverified, Verified], Field(discriminator="status")]


class ComplianceDocument(EmbeddedSchema):
    """Fields every compliance document carries."""

    expiration_date: Optional[date] = None
    document_url: Optional[str] = None
    verification: Verification = Field(default_factory=Unverified)

    @model_validator(mode="before")
    @classmethod
    def fold_verification_fields(cls, data):
        # Accept the flat verified/verified_at/verified_by layout of older
        # records, but only when the three fields agree.
        if not isinstance(data, dict) or "verified" not in data:
            return data
        data = dict(data)
        verified = data.pop("verified")
        verified_at = data.pop("verified_at", None)
        verified_by = data.pop("verified_by", None)
        if verified:
            if verified_at is None or verified_by is None:
                raise ValueError(
                    "verified documents need both verified_at and verified_by"
                )
            data["verification"] = {
                "status": "verified",
                "verified_at": verified_at,
                "verified_by": verified_by,
            }
        else:
            if verified_at is not None or verified_by is not None:
                raise ValueError(
                    "unverified documents cannot carry verified_at or verified_by"
                )
            data["verification"] = {"status": "unverified"}
        return data

    @property
    def is_verified(self) -> bool:
        return isinstance(self.verification, Verified)

    def is_expired(self, on: Optional[date] = None) -> bool:
        if self.expiration_date is None:
            return False
        return self.expiration_date < (on or timezone.now().date())


class SPAMembership(ComplianceDocument):
    """Speech Pathology Australia membership."""

    membership_number: Optional[str] = None
    membership_type: Optional[str] = None


class StateRegistration(ComplianceDocument):
    registration_number: Optional[str] = None
    state: Optional[AUState] = None


class ProfessionalIndemnityInsurance(ComplianceDocument):
    provider: Optional[str] = None
    policy_number: Optional[str] = None
    coverage_amount: Optional[str] = None


class WorkingWithChildrenCheck(ComplianceDocument):
    check_number: Optional[str] = None
    state: Optional[AUState] = None


class PoliceCheck(ComplianceDocument):
    check_number: Optional[str] = None
    issue_date: Optional[date] = None


class AcademicQualification(ComplianceDocument):
    degree: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1900, le=2100)


class AdditionalCredential(ComplianceDocument):
    name: Optional[str] = None
    issuer: Optional[str] = None


class StateLicense(ComplianceDocument):
    """US state license, kept for older profiles."""

    number: Optional[str] = None
    state: Optional[str] = None


class LiabilityInsurance(ComplianceDocument):
    """US liability insurance, kept for older profiles."""

    provider: Optional[str] = None
    policy_number: Optional[str] = None


SINGLE_DOCUMENTS = {
    "spa_membership": SPAMembership,
    "state_registration": StateRegistration,
    "professional_indemnity_insurance": ProfessionalIndemnityInsurance,
    "working_with_children_check": WorkingWithChildrenCheck,
    "police_check": PoliceCheck,
    "state_license": StateLicense,
    "liability_insurance": LiabilityInsurance,
}

LIST_DOCUMENTS = {
    "academic_qualifications": AcademicQualification,
    "additional_credentials": AdditionalCredential,
}

LEGACY_DOCUMENTS = ("state_license", "liability_insurance")


class ComplianceDocuments(EmbeddedSchema):
    spa_membership: Optional[SPAMembership] = None
    state_registration: Optional[StateRegistration] = None
    professional_indemnity_insurance: Optional[ProfessionalIndemnityInsurance] = None
    working_with_children_check: Optional[WorkingWithChildrenCheck] = None
    police_check: Optional[PoliceCheck] = None
    academic_qualifications: List[AcademicQualification] = Field(default_factory=list)
    additional_credentials: List[AdditionalCredential] = Field(default_factory=list)
    state_license: Optional[StateLicense] = None
    liability_insurance: Optional[LiabilityInsurance] = None

    def iter_documents(self, include_legacy: bool = False):
        """Yield (key, index, document) for every stored document."""
        for key in SINGLE_DOCUMENTS:
            if key in LEGACY_DOCUMENTS and not include_legacy:
                continue
            document = getattr(self, key)
            if document is not None:
                yield key, None, document
        for key in LIST_DOCUMENTS:
            for index, document in enumerate(getattr(self, key)):
                yield key, index, document
