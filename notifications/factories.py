# notifications/factories.py
import factory
from users.factories import UserFactory
from .models import Notification


class NotificationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Notification

    user = factory.SubFactory(UserFactory)
    type = Notification.Type.GENERAL
    title = "Factory Test Notification"
    message = "This notification is created via Factory Boy."
    is_read = False
    link = "/dashboard"
    metadata = {"key": "value"}
