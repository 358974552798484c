"""Notification inbox endpoints."""

import structlog
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.services.notification_service import notification_service
from core.views.base import query_flag, schema_response

logger = structlog.get_logger(__name__)


class NotificationListView(APIView):
    """API endpoint for retrieving the authenticated user's notifications.

    GET: Newest notifications for the current user, one page at most
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Retrieve notifications for the authenticated user.

        Query parameters:
        - unreadOnly: Only return notifications that have not been read
          (default: false)

        Args:
            request: HTTP request

        Returns:
            Response with the rendered notifications and the unread count
        """
        ctx = RequestContext.from_request(request)
        unread_only = query_flag(request.query_params.get("unreadOnly"))
        inbox = notification_service.list_notifications(ctx, unread_only=unread_only)

        logger.info(
            "User notifications list retrieved",
            user_id=ctx.user_id,
            count=len(inbox.notifications),
        )
        return schema_response(inbox)


class UnreadCountView(APIView):
    """API endpoint for the unread notification badge."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return ``{count}`` of unread notifications."""
        ctx = RequestContext.from_request(request)
        return schema_response(notification_service.unread_count(ctx))


class MarkAllReadView(APIView):
    """API endpoint for acknowledging every unread notification at once."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Mark all of the caller's unread notifications as read.

        Returns:
            200 with ``{ok, updated}`` where ``updated`` is the number of
            notifications that changed
        """
        ctx = RequestContext.from_request(request)
        return schema_response(notification_service.mark_all_read(ctx))


class MarkReadView(APIView):
    """API endpoint for acknowledging a single notification.

    Idempotent: marking an already-read notification succeeds and keeps
    the original ``readAt``.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def patch(self, request, notification_id):
        """Mark one notification as read.

        Returns:
            200 with the notification
            401 if authentication fails
            403 if it belongs to another user
            404 if it does not exist
        """
        ctx = RequestContext.from_request(request)
        return schema_response(notification_service.mark_read(ctx, notification_id))
