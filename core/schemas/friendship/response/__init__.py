"""Friendship response schemas."""

from core.schemas.friendship.response.friend_request_response import (
    FriendRequestResponse,
)
from core.schemas.friendship.response.friend_request_sent_response import (
    FriendRequestSentResponse,
)
from core.schemas.friendship.response.friend_requests_response import (
    FriendRequestsResponse,
)
from core.schemas.friendship.response.friend_response import FriendResponse
from core.schemas.friendship.response.friends_list_response import (
    FriendsListResponse,
)
from core.schemas.friendship.response.friendship_status_response import (
    FriendshipStatusResponse,
)

__all__ = [
    "FriendRequestResponse",
    "FriendRequestSentResponse",
    "FriendRequestsResponse",
    "FriendResponse",
    "FriendsListResponse",
    "FriendshipStatusResponse",
]
