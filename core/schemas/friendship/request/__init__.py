"""Friendship request schemas."""

from core.schemas.friendship.request.friend_request_action import (
    FriendRequestAction,
)
from core.schemas.friendship.request.friend_request_create import (
    FriendRequestCreate,
)

__all__ = ["FriendRequestAction", "FriendRequestCreate"]
