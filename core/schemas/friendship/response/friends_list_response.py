"""Friend list schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.friendship.response.friend_response import FriendResponse


class FriendsListResponse(BaseSchemaModel):
    """The caller's friends."""

    friends: list[FriendResponse] = Field(...)
