"""Schema for answering a friend request."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FriendRequestAction(BaseSchemaModel):
    """Request body for POST /friends/accept and /friends/decline."""

    request_id: UUID = Field(..., description="Pending friend request")
