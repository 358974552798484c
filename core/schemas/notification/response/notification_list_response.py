"""Schema for the notification inbox."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.notification.response.notification_response import (
    NotificationResponse,
)


class NotificationListResponse(BaseSchemaModel):
    """Newest notifications for the caller, up to one page."""

    notifications: list[NotificationResponse] = Field(
        ..., description="List of notifications"
    )
    unread_count: int = Field(..., ge=0, description="Unread notifications in total")
