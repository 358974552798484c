"""Service for the in-app notification inbox.

Notifications are created by the moderation and friendship workflows and
read, acknowledged and counted by their recipient.
"""

from uuid import UUID

from django.utils import timezone

import structlog

from core.auth.context import RequestContext
from core.constants.limits import NOTIFICATION_PAGE_SIZE
from core.enums import NotificationType
from core.exceptions import ForbiddenError, NotFoundError
from core.models import Media, Notification
from core.schemas.notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

logger = structlog.get_logger(__name__)


# Template map for rendering title/message from the notification type
NOTIFICATION_TEMPLATES: dict[str, dict[str, str]] = {
    NotificationType.MEDIA_APPROVED.value: {
        "title": "Submission approved",
        "message": '"{media_title}" was approved and is now in the catalog',
    },
    NotificationType.MEDIA_REJECTED.value: {
        "title": "Submission rejected",
        "message": '"{media_title}" was not approved',
    },
    NotificationType.FRIEND_REQUEST.value: {
        "title": "New friend request",
        "message": "{actor_name} sent you a friend request",
    },
    NotificationType.FRIEND_ACCEPTED.value: {
        "title": "Friend request accepted",
        "message": "{actor_name} accepted your friend request",
    },
}


class NotificationService:
    """Service for the notification inbox.

    Every read and acknowledgement is scoped to the caller; a user can
    never see or mark another user's notifications.
    """

    def create_notification(
        self,
        recipient_id: UUID | str,
        notification_type: NotificationType,
        actor_id: UUID | str | None = None,
        media: Media | None = None,
    ) -> Notification:
        """Create an unread notification.

        Only called by other services as a side effect of a state change.

        Args:
            recipient_id: User receiving the notification.
            notification_type: What happened.
            actor_id: User who triggered it, if any.
            media: Catalog entry it refers to; its title is snapshotted.

        Returns:
            The created Notification.
        """
        notification = Notification.objects.create(
            user_id=recipient_id,
            notification_type=notification_type.value,
            actor_id=actor_id,
            media=media,
            media_title=media.title if media is not None else None,
        )
        logger.info(
            "notification_created",
            notification_id=str(notification.notification_id),
            recipient_id=str(recipient_id),
            notification_type=notification_type.value,
        )
        return notification

    def list_notifications(
        self, ctx: RequestContext, unread_only: bool = False
    ) -> NotificationListResponse:
        """Get the caller's newest notifications.

        Args:
            ctx: Request context of the caller.
            unread_only: Only include notifications that have not been read.

        Returns:
            Up to one page of rendered notifications, newest first, and the
            total unread count.
        """
        user_id = ctx.require_authenticated()
        logger.info("list_notifications", user_id=user_id, unread_only=unread_only)

        queryset = Notification.objects.select_related("actor").filter(
            user_id=user_id
        )
        if unread_only:
            queryset = queryset.filter(read_at__isnull=True)

        notifications = list(queryset.order_by("-created_at")[:NOTIFICATION_PAGE_SIZE])
        return NotificationListResponse(
            notifications=[self._render_notification(n) for n in notifications],
            unread_count=self._unread_queryset(user_id).count(),
        )

    def mark_read(
        self, ctx: RequestContext, notification_id: UUID
    ) -> NotificationResponse:
        """Mark a single notification as read.

        Marking an already-read notification succeeds without changing
        ``read_at``.

        Raises:
            NotFoundError: If the notification does not exist.
            ForbiddenError: If it belongs to another user.
        """
        user_id = ctx.require_authenticated()
        logger.info(
            "mark_notification_as_read",
            user_id=user_id,
            notification_id=str(notification_id),
        )

        notification = (
            Notification.objects.select_related("actor")
            .filter(notification_id=notification_id)
            .first()
        )
        if notification is None:
            logger.warning(
                "notification_not_found",
                notification_id=str(notification_id),
                user_id=user_id,
            )
            raise NotFoundError("Notification not found")
        if not ctx.is_user(notification.user_id):
            raise ForbiddenError("Forbidden")

        if notification.read_at is None:
            notification.read_at = timezone.now()
            notification.save(update_fields=["read_at"])
            logger.info(
                "notification_marked_as_read",
                notification_id=str(notification_id),
            )

        return self._render_notification(notification)

    def mark_all_read(self, ctx: RequestContext) -> MarkAllReadResponse:
        """Mark every unread notification of the caller as read in one update."""
        user_id = ctx.require_authenticated()
        updated = self._unread_queryset(user_id).update(read_at=timezone.now())
        logger.info("all_notifications_marked_as_read", user_id=user_id, count=updated)
        return MarkAllReadResponse(updated=updated)

    def unread_count(self, ctx: RequestContext) -> UnreadCountResponse:
        """Count the caller's unread notifications."""
        user_id = ctx.require_authenticated()
        return UnreadCountResponse(count=self._unread_queryset(user_id).count())

    def _unread_queryset(self, user_id: str):
        return Notification.objects.filter(user_id=user_id, read_at__isnull=True)

    def _render_notification(self, notification: Notification) -> NotificationResponse:
        """Render a notification to response schema with computed title/message.

        Args:
            notification: The Notification model instance.

        Returns:
            NotificationResponse with title and message populated from the
            template map.
        """
        template = NOTIFICATION_TEMPLATES.get(
            notification.notification_type,
            {"title": "Notification", "message": notification.notification_type},
        )
        actor = notification.actor
        actor_name = (actor.name or actor.email) if actor is not None else None
        data = {
            "actor_name": actor_name or "Someone",
            "media_title": notification.media_title or "Your submission",
        }

        return NotificationResponse(
            notification_id=notification.notification_id,
            notification_type=notification.notification_type,
            actor_id=notification.actor_id,
            actor_name=actor_name,
            media_id=notification.media_id,
            media_title=notification.media_title,
            title=template["title"].format(**data),
            message=template["message"].format(**data),
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


# Singleton instance for use throughout the application
notification_service = NotificationService()
