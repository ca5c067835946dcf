# notifications/metadata.py
"""Per-category metadata payloads attached to notifications."""
from datetime import date
from typing import Optional, Union

from django.core.exceptions import ValidationError
from pydantic import BaseModel, ConfigDict, Field

from core.schemas import validate_document

Reference = Union[int, str]


class NotificationMetadata(BaseModel):
    """Free-form metadata; unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow")


class SessionMetadata(NotificationMetadata):
    session_id: Optional[Reference] = None
    therapist_id: Optional[Reference] = None
    client_id: Optional[Reference] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[str] = None
    minutes_before: Optional[int] = Field(default=None, ge=0)


class PaymentMetadata(NotificationMetadata):
    payment_id: Optional[Reference] = None
    amount: Optional[float] = Field(default=None, ge=0)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)


class MessageMetadata(NotificationMetadata):
    conversation_id: Optional[Reference] = None
    sender_id: Optional[Reference] = None


class ReviewMetadata(NotificationMetadata):
    review_id: Optional[Reference] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)


class AssignmentMetadata(NotificationMetadata):
    assignment_id: Optional[Reference] = None
    due_date: Optional[date] = None


class GoalMetadata(NotificationMetadata):
    goal_id: Optional[Reference] = None


class ForumReplyMetadata(NotificationMetadata):
    post_id: Optional[Reference] = None
    reply_id: Optional[Reference] = None


METADATA_SCHEMAS = {
    "session-reminder": SessionMetadata,
    "session-confirmed": SessionMetadata,
    "session-cancelled": SessionMetadata,
    "session-rescheduled": SessionMetadata,
    "payment": PaymentMetadata,
    "message": MessageMetadata,
    "review": ReviewMetadata,
    "assignment": AssignmentMetadata,
    "goal-completed": GoalMetadata,
    "forum-reply": ForumReplyMetadata,
    "general": NotificationMetadata,
}


def clean_metadata(notification_type, metadata):
    """Validate ``metadata`` against the schema for ``notification_type``."""
    if metadata is None:
        return None
    if not isinstance(metadata, dict):
        raise ValidationError("Metadata must be a JSON object")

    schema = METADATA_SCHEMAS.get(notification_type, NotificationMetadata)
    cleaned = validate_document(schema, metadata)
    # Empty known fields are dropped; extra keys are stored as given.
    return {
        key: value
        for key, value in cleaned.items()
        if value is not None or key not in schema.model_fields
    }
