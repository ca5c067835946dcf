from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("session-reminder", "Session reminder"),
                            ("session-confirmed", "Session confirmed"),
                            ("session-cancelled", "Session cancelled"),
                            ("session-rescheduled", "Session rescheduled"),
                            ("payment", "Payment"),
                            ("message", "Message"),
                            ("review", "Review"),
                            ("assignment", "Assignment"),
                            ("goal-completed", "Goal completed"),
                            ("forum-reply", "Forum reply"),
                            ("general", "General"),
                        ],
                        max_length=30,
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        error_messages={"blank": "Notification title is required"},
                        max_length=255,
                    ),
                ),
                (
                    "message",
                    models.TextField(
                        error_messages={"blank": "Notification message is required"}
                    ),
                ),
                ("link", models.CharField(blank=True, max_length=500, null=True)),
                ("is_read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("metadata", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["user", "is_read", "-created_at"],
                        name="notif_user_read_created_idx",
                    ),
                    models.Index(fields=["type"], name="notif_type_idx"),
                    models.Index(fields=["-created_at"], name="notif_created_idx"),
                ],
            },
        ),
    ]
