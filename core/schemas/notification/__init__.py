"""Notification schemas."""

from core.schemas.notification.response import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

__all__ = [
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "UnreadCountResponse",
]
