# therapist/serializers/compliance.py
from rest_framework import serializers

from therapist.choices import Credentials, TherapistStatus
from therapist.documents import LIST_DOCUMENTS, SINGLE_DOCUMENTS

DOCUMENT_TYPES = list(SINGLE_DOCUMENTS) + list(LIST_DOCUMENTS)


class ComplianceDocumentUploadSerializer(serializers.Serializer):
    """Document metadata submitted by the therapist (the file lives elsewhere)."""

    document_type = serializers.ChoiceField(choices=DOCUMENT_TYPES)
    data = serializers.DictField()


class DocumentVerificationSerializer(serializers.Serializer):
    document_type = serializers.ChoiceField(choices=DOCUMENT_TYPES)
    index = serializers.IntegerField(required=False, min_value=0)
    verified = serializers.BooleanField(default=True)

    def validate(self, attrs):
        if attrs["document_type"] in LIST_DOCUMENTS and "index" not in attrs:
            raise serializers.ValidationError(
                {"index": "An index is required for list documents"}
            )
        return attrs


class StatusChangeSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TherapistStatus.choices)
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class AdminNoteSerializer(serializers.Serializer):
    note = serializers.CharField(max_length=2000)


class CredentialsUpdateSerializer(serializers.Serializer):
    credentials = serializers.ChoiceField(
        choices=Credentials.choices,
        error_messages={"invalid_choice": 'Credentials must be either "SLP" or "SLPA"'},
    )


class BulkCredentialsUpdateSerializer(CredentialsUpdateSerializer):
    therapist_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=False
    )
