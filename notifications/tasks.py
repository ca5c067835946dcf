# notifications/tasks.py
from celery import shared_task
from typing import Optional
import logging
from .services import NotificationService

logger = logging.getLogger(__name__)


@shared_task(
    name="notifications.cleanup_old",
    ignore_result=True,
    priority=5,
)
def cleanup_old_notifications(days: Optional[int] = None) -> Optional[int]:
    """
    Remove old read notifications to prevent database bloat.

    Args:
        days: Number of days after which to delete read notifications;
            defaults to ``NOTIFICATION_RETENTION_DAYS``

    Returns:
        Count of deleted notifications, or None if deletion fails
    """
    try:
        return NotificationService.delete_old_notifications(days=days)
    except Exception:
        logger.exception("Cleanup task failed")
        return None
