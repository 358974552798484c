"""Friendship endpoints."""

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.friendship import (
    FriendRequestAction,
    FriendRequestCreate,
    FriendRequestSentResponse,
)
from core.services.friendship_service import friendship_service
from core.views.base import ok_response, parse_body, schema_response


class FriendsListView(APIView):
    """The caller's accepted friends."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List friends with the other user of each friendship."""
        ctx = RequestContext.from_request(request)
        return schema_response(friendship_service.list_friends(ctx))


class FriendRequestsView(APIView):
    """Pending friend requests, incoming and outgoing."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List pending requests."""
        ctx = RequestContext.from_request(request)
        return schema_response(friendship_service.list_requests(ctx))


class SendFriendRequestView(APIView):
    """Send a friend request.

    POST body: ``{toUserId}``. Returns ``{ok: true, request}``; 400 for a
    self-request, 404 if the user does not exist or is disabled, and 409
    if the two users are already friends or a request is pending in
    either direction.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Handle POST request to send a friend request."""
        ctx = RequestContext.from_request(request)
        body = parse_body(FriendRequestCreate, request.data)
        friend_request = friendship_service.send_request(ctx, body.to_user_id)
        return schema_response(FriendRequestSentResponse(request=friend_request))


class AcceptFriendRequestView(APIView):
    """Accept a pending request addressed to the caller (``{requestId}``)."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Handle POST request to accept a friend request."""
        ctx = RequestContext.from_request(request)
        body = parse_body(FriendRequestAction, request.data)
        friendship_service.accept(ctx, body.request_id)
        return ok_response()


class DeclineFriendRequestView(APIView):
    """Decline a request addressed to the caller (``{requestId}``)."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Handle POST request to decline a friend request."""
        ctx = RequestContext.from_request(request)
        body = parse_body(FriendRequestAction, request.data)
        friendship_service.decline(ctx, body.request_id)
        return ok_response()


class FriendshipStatusView(APIView):
    """How the caller relates to another user."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, user_id):
        """Return self, none, friends, pending_sent or pending_received."""
        ctx = RequestContext.from_request(request)
        return schema_response(friendship_service.status_with(ctx, user_id))
