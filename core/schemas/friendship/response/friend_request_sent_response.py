"""Friend request confirmation schema."""

from core.schemas.friendship.response.friend_request_response import (
    FriendRequestResponse,
)
from core.schemas.ok_response import OkResponse


class FriendRequestSentResponse(OkResponse):
    """Acknowledgement of a sent request, with the created request."""

    request: FriendRequestResponse
