"""Schema for an inbox notification."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums.notification import NotificationType
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationResponse(BaseSchemaModel):
    """Schema for an inbox notification.

    Title and message are rendered from the notification type by the
    service layer.
    """

    notification_id: UUID = Field(..., description="Unique notification identifier")
    notification_type: NotificationType = Field(
        ..., description="Type that determines the template"
    )
    actor_id: UUID | None = Field(None, description="User who triggered it")
    actor_name: str | None = Field(None, description="Display name of the actor")
    media_id: UUID | None = Field(None, description="Referenced catalog entry")
    media_title: str | None = Field(None, description="Title snapshot")
    title: str = Field(..., description="Rendered notification title")
    message: str = Field(..., description="Rendered notification message")
    is_read: bool = Field(..., description="Whether the notification has been read")
    read_at: datetime | None = Field(None, description="When it was acknowledged")
    created_at: datetime = Field(..., description="When the notification was created")
