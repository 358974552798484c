"""Pending friend request schema."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class FriendRequestResponse(BaseSchemaModel):
    """A pending friend request."""

    request_id: UUID = Field(..., description="Identifier used to accept/decline")
    from_user: UserSummary
    to_user: UserSummary
    created_at: datetime
