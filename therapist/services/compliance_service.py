# therapist/services/compliance_service.py
import logging
from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from core.schemas import validate_document
from therapist.documents import (
    LIST_DOCUMENTS,
    SINGLE_DOCUMENTS,
    ComplianceDocument,
    Unverified,
    Verified,
)
from therapist.exceptions import UnknownComplianceDocument

logger = logging.getLogger(__name__)

# Verification is only changed through verify_document / unverify_document.
VERIFICATION_KEYS = ("verification", "verified", "verified_at", "verified_by")


class ComplianceService:
    """Upload metadata for, and verify, AU compliance documents."""

    @staticmethod
    def _strip_verification(data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if k not in VERIFICATION_KEYS}

    @staticmethod
    def _get_document(bundle, key: str, index: Optional[int]) -> ComplianceDocument:
        if key in SINGLE_DOCUMENTS:
            document = getattr(bundle, key)
            if document is None:
                raise ValidationError({key: "Document has not been uploaded"})
            return document
        if key in LIST_DOCUMENTS:
            documents = getattr(bundle, key)
            if index is None or not 0 <= index < len(documents):
                raise ValidationError({key: f"No document at index {index}"})
            return documents[index]
        raise UnknownComplianceDocument(key)

    @staticmethod
    @transaction.atomic
    def update_document(profile, key: str, data: Dict[str, Any]) -> ComplianceDocument:
        """
        Create or update a singleton compliance document.

        Fields in ``data`` are merged over the stored document. If any field
        changes, the document goes back to unverified.
        """
        if key not in SINGLE_DOCUMENTS:
            raise UnknownComplianceDocument(key)
        schema = SINGLE_DOCUMENTS[key]

        bundle = profile.get_compliance()
        current = getattr(bundle, key)
        merged = current.model_dump(exclude={"verification"}) if current else {}
        merged.update(ComplianceService._strip_verification(data))

        try:
            cleaned = validate_document(schema, merged)
        except ValidationError as e:
            raise ValidationError({key: e.messages})
        document = schema.model_validate(cleaned)

        if current is not None and current.model_dump(
            exclude={"verification"}
        ) == document.model_dump(exclude={"verification"}):
            document.verification = current.verification

        setattr(bundle, key, document)
        profile.set_compliance(bundle)
        profile.save()
        logger.info("Updated %s for therapist %s", key, profile.pk)
        return document

    @staticmethod
    @transaction.atomic
    def add_document(profile, key: str, data: Dict[str, Any]) -> ComplianceDocument:
        """Append an unverified entry to a list document (qualifications, credentials)."""
        if key not in LIST_DOCUMENTS:
            raise UnknownComplianceDocument(key)
        schema = LIST_DOCUMENTS[key]

        try:
            cleaned = validate_document(
                schema, ComplianceService._strip_verification(data)
            )
        except ValidationError as e:
            raise ValidationError({key: e.messages})
        document = schema.model_validate(cleaned)

        bundle = profile.get_compliance()
        getattr(bundle, key).append(document)
        profile.set_compliance(bundle)
        profile.save()
        logger.info("Added %s entry for therapist %s", key, profile.pk)
        return document

    @staticmethod
    @transaction.atomic
    def remove_document(profile, key: str, index: Optional[int] = None) -> None:
        bundle = profile.get_compliance()
        ComplianceService._get_document(bundle, key, index)
        if key in LIST_DOCUMENTS:
            getattr(bundle, key).pop(index)
        else:
            setattr(bundle, key, None)
        profile.set_compliance(bundle)
        profile.save()
        logger.info("Removed %s from therapist %s", key, profile.pk)

    @staticmethod
    @transaction.atomic
    def verify_document(profile, key: str, admin, index: Optional[int] = None) -> ComplianceDocument:
        bundle = profile.get_compliance()
        document = ComplianceService._get_document(bundle, key, index)
        document.verification = Verified(verified_at=timezone.now(), verified_by=admin.pk)
        profile.set_compliance(bundle)
        profile.save()
        logger.info(
            "Admin %s verified %s%s for therapist %s",
            admin.pk,
            key,
            "" if index is None else f"[{index}]",
            profile.pk,
        )
        return document

    @staticmethod
    @transaction.atomic
    def unverify_document(profile, key: str, admin, index: Optional[int] = None) -> ComplianceDocument:
        bundle = profile.get_compliance()
        document = ComplianceService._get_document(bundle, key, index)
        document.verification = Unverified()
        profile.set_compliance(bundle)
        profile.save()
        logger.info(
            "Admin %s revoked verification of %s for therapist %s",
            admin.pk,
            key,
            profile.pk,
        )
        return document
