"""Notification response schemas."""

from core.schemas.notification.response.mark_all_read_response import (
    MarkAllReadResponse,
)
from core.schemas.notification.response.notification_list_response import (
    NotificationListResponse,
)
from core.schemas.notification.response.notification_response import (
    NotificationResponse,
)
from core.schemas.notification.response.unread_count_response import (
    UnreadCountResponse,
)

__all__ = [
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "UnreadCountResponse",
]
