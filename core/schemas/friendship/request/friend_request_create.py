"""Schema for sending a friend request."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FriendRequestCreate(BaseSchemaModel):
    """Request body for POST /friends/request."""

    to_user_id: UUID = Field(..., description="User to befriend")
