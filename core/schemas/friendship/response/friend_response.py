"""Friend list item schema."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class FriendResponse(BaseSchemaModel):
    """An accepted friendship seen from the caller's side."""

    friendship_id: UUID
    user: UserSummary = Field(..., description="The other user")
    since: datetime = Field(..., description="When the request was accepted")
