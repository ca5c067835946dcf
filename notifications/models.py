# notifications/models.py
from django.db import models
from django.utils import timezone
from django.conf import settings
from django.core.exceptions import ValidationError

from .metadata import clean_metadata


class Notification(models.Model):
    """User notifications"""

    class Type(models.TextChoices):
        SESSION_REMINDER = "session-reminder", "Session reminder"
        SESSION_CONFIRMED = "session-confirmed", "Session confirmed"
        SESSION_CANCELLED = "session-cancelled", "Session cancelled"
        SESSION_RESCHEDULED = "session-rescheduled", "Session rescheduled"
        PAYMENT = "payment", "Payment"
        MESSAGE = "message", "Message"
        REVIEW = "review", "Review"
        ASSIGNMENT = "assignment", "Assignment"
        GOAL_COMPLETED = "goal-completed", "Goal completed"
        FORUM_REPLY = "forum-reply", "Forum reply"
        GENERAL = "general", "General"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    type = models.CharField(max_length=30, choices=Type.choices)
    title = models.CharField(
        max_length=255,
        error_messages={"blank": "Notification title is required"},
    )
    message = models.TextField(
        error_messages={"blank": "Notification message is required"},
    )
    link = models.CharField(max_length=500, blank=True, null=True)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    metadata = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["user", "is_read", "-created_at"],
                name="notif_user_read_created_idx",
            ),
            models.Index(fields=["type"], name="notif_type_idx"),
            models.Index(fields=["-created_at"], name="notif_created_idx"),
        ]

    def __str__(self):
        return self.title

    def clean_fields(self, exclude=None):
        # Title and message are stored trimmed; blank-after-trim is rejected.
        self.title = (self.title or "").strip()
        self.message = (self.message or "").strip()
        super().clean_fields(exclude=exclude)

    def clean(self):
        super().clean()
        errors = {}

        if self.is_read and self.read_at is None:
            errors["read_at"] = "read_at must be set when the notification is read"
        elif not self.is_read and self.read_at is not None:
            errors["read_at"] = "read_at must be empty while the notification is unread"

        try:
            self.metadata = clean_metadata(self.type, self.metadata)
        except ValidationError as e:
            errors["metadata"] = e.messages

        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def mark_as_read(self):
        if self.is_read:
            return
        self.is_read = True
        self.read_at = timezone.now()
        self.save()

    def mark_as_unread(self):
        if not self.is_read:
            return
        self.is_read = False
        self.read_at = None
        self.save()
