"""Pending friend requests schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.friendship.response.friend_request_response import (
    FriendRequestResponse,
)


class FriendRequestsResponse(BaseSchemaModel):
    """Pending requests addressed to and sent by the caller."""

    incoming: list[FriendRequestResponse] = Field(...)
    outgoing: list[FriendRequestResponse] = Field(...)
