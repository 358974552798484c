"""Service for the friendship lifecycle.

A friend request is a PENDING row from one user to another. The recipient
either accepts it, which makes the pair friends, or declines it, which
deletes the row. At most one row exists per pair of users.
"""

from uuid import UUID

from django.db import IntegrityError, transaction

import structlog

from core.auth.context import RequestContext
from core.enums import FriendshipStatus, NotificationType, RelationshipStatus
from core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from core.models import Friendship
from core.repositories import FriendshipRepository, UserRepository
from core.schemas.friendship import (
    FriendRequestResponse,
    FriendRequestsResponse,
    FriendResponse,
    FriendsListResponse,
    FriendshipStatusResponse,
)
from core.schemas.user import UserSummary
from core.services.notification_service import notification_service

logger = structlog.get_logger(__name__)


class FriendshipService:
    """Service for sending, answering and listing friend requests."""

    def send_request(
        self, ctx: RequestContext, to_user_id: UUID | str
    ) -> FriendRequestResponse:
        """Send a friend request and notify the recipient.

        Raises:
            InvalidInputError: If the caller targets themselves.
            NotFoundError: If the target does not exist or is disabled.
            ConflictError: If the two users already have a row in either
                direction.
        """
        from_user_id = ctx.require_authenticated()
        if ctx.is_user(to_user_id):
            raise InvalidInputError("Cannot add yourself")

        to_user = UserRepository.get_active_user(to_user_id)
        if to_user is None:
            raise NotFoundError("User not found")

        existing = FriendshipRepository.find_between(from_user_id, to_user.user_id)
        if existing is not None:
            raise ConflictError(self._conflict_message(existing, from_user_id))

        try:
            with transaction.atomic():
                friendship = Friendship.objects.create(
                    from_user_id=from_user_id,
                    to_user=to_user,
                    status=FriendshipStatus.PENDING.value,
                )
                notification_service.create_notification(
                    recipient_id=to_user.user_id,
                    notification_type=NotificationType.FRIEND_REQUEST,
                    actor_id=from_user_id,
                )
        except IntegrityError as err:
            # A concurrent request between the same pair won the race
            logger.info(
                "friend_request_race_lost",
                from_user_id=from_user_id,
                to_user_id=str(to_user.user_id),
            )
            raise ConflictError("Request already exists") from err

        logger.info(
            "friend_request_sent",
            friendship_id=str(friendship.friendship_id),
            from_user_id=from_user_id,
            to_user_id=str(to_user.user_id),
        )
        friendship = Friendship.objects.select_related("from_user", "to_user").get(
            friendship_id=friendship.friendship_id
        )
        return self._to_request_response(friendship)

    def accept(self, ctx: RequestContext, request_id: UUID | str) -> None:
        """Accept a pending request addressed to the caller.

        Raises:
            NotFoundError: If the request does not exist.
            ForbiddenError: If the caller is not its recipient.
            ConflictError: If it has already been accepted.
        """
        user_id = ctx.require_authenticated()
        friendship = self._get_addressed_request(ctx, request_id)
        if friendship.status != FriendshipStatus.PENDING.value:
            raise ConflictError("Already handled")

        with transaction.atomic():
            friendship.status = FriendshipStatus.ACCEPTED.value
            friendship.save(update_fields=["status", "updated_at"])
            notification_service.create_notification(
                recipient_id=friendship.from_user_id,
                notification_type=NotificationType.FRIEND_ACCEPTED,
                actor_id=user_id,
            )

        logger.info(
            "friend_request_accepted",
            friendship_id=str(friendship.friendship_id),
            user_id=user_id,
        )

    def decline(self, ctx: RequestContext, request_id: UUID | str) -> None:
        """Decline a request addressed to the caller by deleting it."""
        user_id = ctx.require_authenticated()
        friendship = self._get_addressed_request(ctx, request_id)
        friendship.delete()
        logger.info(
            "friend_request_declined", friendship_id=str(request_id), user_id=user_id
        )

    def list_friends(self, ctx: RequestContext) -> FriendsListResponse:
        """Accepted friendships of the caller, showing the other user."""
        user_id = ctx.require_authenticated()
        friends = []
        for friendship in FriendshipRepository.accepted_for(user_id):
            other = (
                friendship.to_user
                if ctx.is_user(friendship.from_user_id)
                else friendship.from_user
            )
            friends.append(
                FriendResponse(
                    friendship_id=friendship.friendship_id,
                    user=UserSummary.model_validate(other),
                    since=friendship.updated_at,
                )
            )
        return FriendsListResponse(friends=friends)

    def list_requests(self, ctx: RequestContext) -> FriendRequestsResponse:
        """Pending requests addressed to and sent by the caller."""
        user_id = ctx.require_authenticated()
        return FriendRequestsResponse(
            incoming=[
                self._to_request_response(f)
                for f in FriendshipRepository.pending_incoming(user_id)
            ],
            outgoing=[
                self._to_request_response(f)
                for f in FriendshipRepository.pending_outgoing(user_id)
            ],
        )

    def status_with(
        self, ctx: RequestContext, other_user_id: UUID | str
    ) -> FriendshipStatusResponse:
        """How the caller relates to ``other_user_id``."""
        user_id = ctx.require_authenticated()
        if ctx.is_user(other_user_id):
            return FriendshipStatusResponse(status=RelationshipStatus.SELF)

        friendship = FriendshipRepository.find_between(user_id, other_user_id)
        if friendship is None:
            return FriendshipStatusResponse(status=RelationshipStatus.NONE)
        if friendship.status == FriendshipStatus.ACCEPTED.value:
            return FriendshipStatusResponse(status=RelationshipStatus.FRIENDS)

        status = (
            RelationshipStatus.PENDING_SENT
            if ctx.is_user(friendship.from_user_id)
            else RelationshipStatus.PENDING_RECEIVED
        )
        return FriendshipStatusResponse(
            status=status, request_id=friendship.friendship_id
        )

    def _get_addressed_request(
        self, ctx: RequestContext, request_id: UUID | str
    ) -> Friendship:
        friendship = Friendship.objects.filter(friendship_id=request_id).first()
        if friendship is None:
            raise NotFoundError("Request not found")
        if not ctx.is_user(friendship.to_user_id):
            raise ForbiddenError("Not your request")
        return friendship

    def _conflict_message(self, existing: Friendship, from_user_id: str) -> str:
        if existing.status == FriendshipStatus.ACCEPTED.value:
            return "Already friends"
        if str(existing.from_user_id) == from_user_id:
            return "Request already sent"
        return "They already sent you a request. Accept it from your requests."

    def _to_request_response(self, friendship: Friendship) -> FriendRequestResponse:
        return FriendRequestResponse(
            request_id=friendship.friendship_id,
            from_user=UserSummary.model_validate(friendship.from_user),
            to_user=UserSummary.model_validate(friendship.to_user),
            created_at=friendship.created_at,
        )


# Singleton instance for use throughout the application
friendship_service = FriendshipService()
