# notifications/services.py
import logging
from datetime import timedelta
from typing import Iterable, List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from .models import Notification

logger = logging.getLogger(__name__)


def format_lead_time(minutes_before: int) -> str:
    """Render a reminder lead time as '2 hours' / '45 minutes'."""
    if minutes_before >= 60:
        hours = minutes_before // 60
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{minutes_before} minute{'s' if minutes_before > 1 else ''}"


class NotificationService:
    """Handles notification operations centrally"""

    @staticmethod
    def create_notification(
        user,
        notification_type: str,
        title: str,
        message: str,
        link: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> Notification:
        """Create a single notification; raises ValidationError on bad input."""
        notification = Notification(
            user=user,
            type=notification_type,
            title=title,
            message=message,
            link=link,
            metadata=metadata,
        )
        notification.save()
        logger.info(
            "Created %s notification %s for user %s",
            notification.type,
            notification.id,
            user.id,
        )
        return notification

    @staticmethod
    @transaction.atomic
    def create_bulk_notifications(
        users: Iterable, notification_type: str, title: str, message: str, **kwargs
    ) -> List[Notification]:
        """Create one notification per user, all or nothing."""
        notifications = [
            NotificationService.create_notification(
                user=user,
                notification_type=notification_type,
                title=title,
                message=message,
                **kwargs,
            )
            for user in users
        ]
        logger.info("Created %s %s notifications", len(notifications), notification_type)
        return notifications

    @staticmethod
    def session_reminder(
        user,
        session_date: str,
        session_time: str,
        minutes_before: int = 24 * 60,
        session_id=None,
    ) -> Notification:
        name = user.first_name or user.username
        return NotificationService.create_notification(
            user=user,
            notification_type=Notification.Type.SESSION_REMINDER,
            title="Session Reminder",
            message=(
                f"Hi {name}, your therapy session is scheduled for {session_date} "
                f"at {session_time} (in {format_lead_time(minutes_before)})"
            ),
            link="/sessions",
            metadata={
                "session_id": session_id,
                "scheduled_time": session_time,
                "minutes_before": minutes_before,
            },
        )

    @staticmethod
    def get_notifications(
        user,
        unread_only: bool = False,
        notification_type: Optional[str] = None,
    ) -> QuerySet:
        queryset = Notification.objects.filter(user=user)
        if unread_only:
            queryset = queryset.filter(is_read=False)
        if notification_type:
            queryset = queryset.filter(type=notification_type)
        return queryset.order_by("-created_at")

    @staticmethod
    def unread_count(user) -> int:
        return Notification.objects.filter(user=user, is_read=False).count()

    @staticmethod
    @transaction.atomic
    def mark_as_read(notification_ids: List[int], user) -> int:
        try:
            updated = Notification.objects.filter(
                id__in=notification_ids, user=user, is_read=False
            ).update(is_read=True, read_at=timezone.now())
            logger.info("Marked %s notifications as read for user %s", updated, user.id)
            return updated
        except Exception:
            logger.exception("Error marking notifications as read")
            raise

    @staticmethod
    @transaction.atomic
    def mark_all_as_read(user) -> int:
        updated = Notification.objects.filter(user=user, is_read=False).update(
            is_read=True, read_at=timezone.now()
        )
        logger.info("Marked all %s notifications as read for user %s", updated, user.id)
        return updated

    @staticmethod
    @transaction.atomic
    def mark_as_unread(notification_ids: List[int], user) -> int:
        try:
            updated = Notification.objects.filter(
                id__in=notification_ids, user=user, is_read=True
            ).update(is_read=False, read_at=None)
            logger.info(
                "Marked %s notifications as unread for user %s", updated, user.id
            )
            return updated
        except Exception:
            logger.exception("Error marking notifications as unread")
            raise

    @staticmethod
    @transaction.atomic
    def delete_notifications(notification_ids: List[int], user) -> int:
        deleted, _ = Notification.objects.filter(
            id__in=notification_ids, user=user
        ).delete()
        logger.info("Deleted %s notifications for user %s", deleted, user.id)
        return deleted

    @staticmethod
    def delete_old_notifications(days: Optional[int] = None) -> int:
        """Delete read notifications older than the retention window."""
        if days is None:
            days = settings.NOTIFICATION_RETENTION_DAYS
        cutoff_date = timezone.now() - timedelta(days=days)
        deleted_count, _ = Notification.objects.filter(
            created_at__lt=cutoff_date, is_read=True
        ).delete()

        logger.info(f"Deleted {deleted_count} old notifications")
        return deleted_count
