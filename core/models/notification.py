"""Notification model for the in-app inbox.

Notifications are only ever created as a side effect of another state
change (a submission being reviewed, a friend request being sent or
accepted). The only mutation afterwards is the recipient setting
``read_at``.
"""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import NotificationType


class Notification(models.Model):
    """A pending or acknowledged alert for one user.

    Title and message are not stored; they are rendered from
    ``notification_type`` and the referenced actor/media when the inbox is
    read.

    Attributes:
        notification_id: Unique identifier for the notification.
        user: The recipient.
        notification_type: What happened.
        actor: The user who triggered the notification, if any.
        media: The catalog entry the notification is about, if any.
        media_title: Title snapshot taken when the notification was created.
        read_at: When the recipient acknowledged it; null while unread.
        created_at: When the notification was created.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="user_id",
        help_text="User receiving the notification",
    )
    notification_type = models.CharField(
        max_length=30,
        choices=[(t.value, t.value) for t in NotificationType],
        help_text="Type determining how the notification is rendered",
    )
    actor = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        related_name="+",
        db_column="actor_id",
        blank=True,
        null=True,
        help_text="User whose action triggered the notification",
    )
    media = models.ForeignKey(
        "core.Media",
        on_delete=models.SET_NULL,
        related_name="+",
        db_column="media_id",
        blank=True,
        null=True,
    )
    media_title = models.CharField(max_length=255, blank=True, null=True)
    read_at = models.DateTimeField(
        blank=True,
        null=True,
        help_text="When the recipient marked the notification as read",
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the notification was created",
    )

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "-created_at"]),
            models.Index(fields=["user", "read_at"]),
        ]

    @property
    def is_read(self) -> bool:
        """Return True once the recipient has acknowledged the notification."""
        return self.read_at is not None

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"user={self.user_id}, "
            f"read_at={self.read_at})>"
        )
