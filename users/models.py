# users/models.py
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.utils import timezone
import logging
from model_utils import FieldTracker

logger = logging.getLogger(__name__)


class CustomUser(AbstractUser):
    USER_TYPE_CHOICES = [
        ("client", "Client"),
        ("therapist", "Therapist"),
        ("admin", "Admin"),
    ]

    user_type = models.CharField(
        max_length=10,
        choices=USER_TYPE_CHOICES,
        default="client",
    )
    email = models.EmailField(unique=True)
    phone_number = models.CharField(max_length=20, blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    tracker = FieldTracker(["user_type"])

    REQUIRED_FIELDS = ["email"]

    class Meta:
        db_table = "users_user"
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.username

    @property
    def is_platform_admin(self):
        return self.is_superuser or self.user_type == "admin"

    def save(self, *args, **kwargs):
        type_changed = not self._state.adding and self.tracker.has_changed("user_type")
        previous = self.tracker.previous("user_type")
        super().save(*args, **kwargs)

        if type_changed:
            logger.info(
                "User %s type changed from %s to %s",
                self.pk,
                previous,
                self.user_type,
            )
