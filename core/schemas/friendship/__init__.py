"""Friendship schemas."""

from core.schemas.friendship.request import FriendRequestAction, FriendRequestCreate
from core.schemas.friendship.response import (
    FriendRequestResponse,
    FriendRequestSentResponse,
    FriendRequestsResponse,
    FriendResponse,
    FriendsListResponse,
    FriendshipStatusResponse,
)

__all__ = [
    "FriendRequestAction",
    "FriendRequestCreate",
    "FriendRequestResponse",
    "FriendRequestSentResponse",
    "FriendRequestsResponse",
    "FriendResponse",
    "FriendsListResponse",
    "FriendshipStatusResponse",
]
