# notifications/admin.py
from django.contrib import admin
from django.utils import timezone
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("user", "title", "type", "is_read", "created_at")
    list_filter = ("type", "is_read")
    search_fields = ("user__username", "title", "message")
    readonly_fields = ("created_at", "updated_at", "read_at")
    actions = ["mark_as_read"]

    def mark_as_read(self, request, queryset):
        queryset.filter(is_read=False).update(is_read=True, read_at=timezone.now())

    mark_as_read.short_description = "Mark selected notifications as read"
