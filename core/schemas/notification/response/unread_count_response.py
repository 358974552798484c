"""Schema for the unread notification count."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UnreadCountResponse(BaseSchemaModel):
    """Returned by GET /notifications/unread-count."""

    count: int = Field(..., ge=0, description="Number of unread notifications")
