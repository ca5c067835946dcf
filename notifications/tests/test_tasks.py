from datetime import timedelta

import pytest
from django.utils import timezone

from notifications.factories import NotificationFactory
from notifications.models import Notification
from notifications.tasks import cleanup_old_notifications


@pytest.mark.django_db
def test_cleanup_task_purges_old_read_notifications(client_user):
    old = NotificationFactory(user=client_user, is_read=True, read_at=timezone.now())
    Notification.objects.filter(id=old.id).update(
        created_at=timezone.now() - timedelta(days=10)
    )

    result = cleanup_old_notifications.apply(kwargs={"days": 7})

    assert result.get() == 1
    assert not Notification.objects.filter(id=old.id).exists()
