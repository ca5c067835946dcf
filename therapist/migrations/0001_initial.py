from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import therapist.validators


SPECIALIZATIONS = [
    "Early Intervention",
    "Articulation & Phonology",
    "Language Development",
    "Fluency/Stuttering",
    "Voice Therapy",
    "Feeding & Swallowing",
    "AAC",
    "Cognitive-Communication",
    "Neurogenic Disorders",
    "Accent Modification",
    "Gender-Affirming Voice",
    "Pediatric",
    "Adult",
    "Geriatric",
]

LANGUAGES = [
    "en", "es", "fr", "de", "zh", "ja", "ko", "ar", "pt",
    "ru", "it", "hi", "nl", "pl", "tr", "vi", "asl",
]


def profile_fields():
    return [
        (
            "id",
            models.BigAutoField(
                auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
            ),
        ),
        (
            "license_number",
            models.CharField(
                error_messages={"blank": "License number is required"}, max_length=100
            ),
        ),
        (
            "licensed_states",
            models.JSONField(
                blank=True,
                default=list,
                validators=[therapist.validators.StringListValidator()],
            ),
        ),
        (
            "specializations",
            models.JSONField(
                blank=True,
                default=list,
                validators=[therapist.validators.ChoiceListValidator(SPECIALIZATIONS)],
            ),
        ),
        (
            "credentials",
            models.CharField(
                choices=[
                    ("SLP", "Speech-Language Pathologist"),
                    ("SLPA", "Speech-Language Pathology Assistant"),
                ],
                default="SLP",
                max_length=4,
            ),
        ),
        (
            "spoken_languages",
            models.JSONField(
                blank=True,
                default=list,
                validators=[therapist.validators.ChoiceListValidator(LANGUAGES)],
            ),
        ),
        ("bilingual_therapy", models.BooleanField(default=False)),
        (
            "bio",
            models.TextField(
                blank=True,
                max_length=2000,
                validators=[
                    django.core.validators.MaxLengthValidator(
                        2000, message="Bio cannot exceed 2000 characters"
                    )
                ],
            ),
        ),
        ("location", models.CharField(blank=True, max_length=255)),
        ("education", models.JSONField(blank=True, default=list)),
        ("certifications", models.JSONField(blank=True, default=list)),
        ("work_experience", models.JSONField(blank=True, default=list)),
        (
            "experience",
            models.PositiveIntegerField(
                default=0,
                help_text="Years of experience",
                validators=[django.core.validators.MinValueValidator(0)],
            ),
        ),
        (
            "hourly_rate",
            models.DecimalField(
                decimal_places=2,
                error_messages={"null": "Hourly rate is required"},
                max_digits=8,
                validators=[
                    django.core.validators.MinValueValidator(
                        0, message="Hourly rate must be positive"
                    )
                ],
            ),
        ),
        (
            "availability",
            models.JSONField(
                blank=True, default=list, help_text="Weekly availability windows"
            ),
        ),
        (
            "rating",
            models.FloatField(
                default=0.0,
                validators=[
                    therapist.validators.FiniteNumberValidator(),
                    django.core.validators.MinValueValidator(0.0),
                    django.core.validators.MaxValueValidator(5.0),
                ],
            ),
        ),
        ("total_reviews", models.PositiveIntegerField(default=0)),
        ("total_sessions", models.PositiveIntegerField(default=0)),
        ("is_verified", models.BooleanField(default=False)),
        ("stripe_account_id", models.CharField(blank=True, max_length=255, null=True)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="TherapistProfile",
            fields=profile_fields()
            + [
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="therapist_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "active_clients",
                    models.ManyToManyField(
                        blank=True,
                        limit_choices_to={"user_type": "client"},
                        related_name="us_therapists",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Therapist Profile (US)",
                "verbose_name_plural": "Therapist Profiles (US)",
                "ordering": ["-rating", "-total_sessions"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["licensed_states"], name="ther_us_states_idx"),
                    models.Index(fields=["specializations"], name="ther_us_spec_idx"),
                    models.Index(fields=["-rating"], name="ther_us_rating_idx"),
                    models.Index(fields=["is_verified"], name="ther_us_verified_idx"),
                    models.Index(fields=["credentials"], name="ther_us_cred_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AUTherapistProfile",
            fields=profile_fields()
            + [
                ("practice_location", models.JSONField(blank=True, default=dict)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("inactive", "Inactive"),
                            ("active", "Active"),
                            ("paused", "Paused"),
                        ],
                        default="pending",
                        max_length=10,
                    ),
                ),
                (
                    "can_supervise",
                    models.BooleanField(
                        default=False,
                        help_text="Indicates if this SLP can supervise SLPA assistants",
                    ),
                ),
                ("compliance_documents", models.JSONField(blank=True, default=dict)),
                ("admin_notes", models.JSONField(blank=True, default=list)),
                ("paused_at", models.DateTimeField(blank=True, null=True)),
                ("pause_reason", models.TextField(blank=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="au_therapist_profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "active_clients",
                    models.ManyToManyField(
                        blank=True,
                        limit_choices_to={"user_type": "client"},
                        related_name="au_therapists",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "paused_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Therapist Profile (AU)",
                "verbose_name_plural": "Therapist Profiles (AU)",
                "ordering": ["-rating", "-total_sessions"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["licensed_states"], name="ther_au_states_idx"),
                    models.Index(fields=["specializations"], name="ther_au_spec_idx"),
                    models.Index(fields=["-rating"], name="ther_au_rating_idx"),
                    models.Index(fields=["is_verified"], name="ther_au_verified_idx"),
                    models.Index(fields=["status"], name="ther_au_status_idx"),
                    models.Index(fields=["credentials"], name="ther_au_cred_idx"),
                ],
            },
        ),
    ]
