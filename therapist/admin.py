from django.contrib import admin
from django.utils.html import format_html

from .models import AUTherapistProfile, TherapistProfile


class BaseTherapistProfileAdmin(admin.ModelAdmin):
    list_display = (
        "user",
        "license_number",
        "credentials",
        "hourly_rate",
        "rating",
        "is_verified",
    )
    list_filter = ("credentials", "is_verified", "bilingual_therapy")
    search_fields = ("user__username", "user__email", "license_number")
    readonly_fields = ("active_client_count", "created_at", "updated_at")
    filter_horizontal = ("active_clients",)


@admin.register(TherapistProfile)
class TherapistProfileAdmin(BaseTherapistProfileAdmin):
    pass


@admin.register(AUTherapistProfile)
class AUTherapistProfileAdmin(BaseTherapistProfileAdmin):
    list_display = BaseTherapistProfileAdmin.list_display + (
        "status_badge",
        "compliance_status",
    )
    list_filter = BaseTherapistProfileAdmin.list_filter + ("status", "can_supervise")
    readonly_fields = BaseTherapistProfileAdmin.readonly_fields + (
        "paused_at",
        "paused_by",
    )

    STATUS_COLOURS = {
        "active": "green",
        "pending": "orange",
        "paused": "grey",
        "inactive": "red",
    }

    def status_badge(self, obj):
        return format_html(
            '<span style="color: {};">{}</span>',
            self.STATUS_COLOURS.get(obj.status, "black"),
            obj.get_status_display(),
        )

    status_badge.short_description = "Status"

    def compliance_status(self, obj):
        summary = obj.compliance_summary()
        problems = [
            key
            for key, item in summary.items()
            if not item["present"] or not item["verified"] or item["expired"]
        ]
        if not problems:
            return format_html('<span style="color: green;">Complete</span>')
        return format_html(
            '<span style="color: red;">{} outstanding</span>', len(problems)
        )

    compliance_status.short_description = "Compliance"
