# notifications/serializers.py
from rest_framework import serializers
from .models import Notification


class NotificationUpdateSerializer(serializers.Serializer):
    is_read = serializers.BooleanField()


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = [
            "id",
            "type",
            "title",
            "message",
            "link",
            "is_read",
            "read_at",
            "metadata",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
