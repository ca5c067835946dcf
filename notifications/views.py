# notifications/views.py
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .filters import NotificationFilter
from .models import Notification
from .permissions import IsNotificationOwner
from .serializers import NotificationSerializer, NotificationUpdateSerializer
from .services import NotificationService
import logging

logger = logging.getLogger(__name__)


class NotificationViewSet(viewsets.ModelViewSet):
    serializer_class = NotificationSerializer
    permission_classes = [permissions.IsAuthenticated, IsNotificationOwner]
    filterset_class = NotificationFilter
    http_method_names = ["get", "patch", "post", "delete", "head", "options"]

    def get_queryset(self):
        """Notifications for the current user, newest first."""
        return Notification.objects.filter(user=self.request.user).order_by(
            "-created_at"
        )

    @extend_schema(
        description="Mark a notification as read or unread",
        request=NotificationUpdateSerializer,
        responses={200: NotificationSerializer},
    )
    def partial_update(self, request, *args, **kwargs):
        notification = self.get_object()
        serializer = NotificationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if serializer.validated_data["is_read"]:
            NotificationService.mark_as_read([notification.id], request.user)
        else:
            NotificationService.mark_as_unread([notification.id], request.user)

        notification.refresh_from_db()
        return Response(NotificationSerializer(notification).data)

    def perform_destroy(self, instance):
        NotificationService.delete_notifications([instance.id], self.request.user)

    @extend_schema(
        description="Get the unread notification count for the current user",
        responses={
            200: {
                "type": "object",
                "properties": {
                    "count": {"type": "integer"},
                },
            }
        },
    )
    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        return Response({"count": NotificationService.unread_count(request.user)})

    @extend_schema(
        description="Mark all unread notifications as read",
        request=None,
        responses={
            200: {
                "type": "object",
                "properties": {
                    "status": {"type": "string"},
                    "count": {"type": "integer"},
                },
            }
        },
    )
    @action(detail=False, methods=["post"], url_path="mark-all-read")
    def mark_all_read(self, request):
        updated = NotificationService.mark_all_as_read(request.user)
        return Response({"status": "success", "count": updated}, status=status.HTTP_200_OK)
