"""Repository for friendship queries."""

from uuid import UUID

from django.db.models import Q, QuerySet

from core.enums import FriendshipStatus
from core.models import Friendship, make_pair_key


class FriendshipRepository:
    """Lookups over the friendship table.

    A pair of users has at most one row regardless of direction, so
    ``find_between`` goes through the unique pair key.
    """

    @staticmethod
    def find_between(user_a: UUID | str, user_b: UUID | str) -> Friendship | None:
        """Return the row linking two users in either direction, if any."""
        return (
            Friendship.objects.select_related("from_user", "to_user")
            .filter(pair_key=make_pair_key(user_a, user_b))
            .first()
        )

    @staticmethod
    def accepted_for(user_id: UUID | str) -> QuerySet[Friendship]:
        """Accepted friendships the user is part of, most recent first."""
        return (
            Friendship.objects.select_related("from_user", "to_user")
            .filter(status=FriendshipStatus.ACCEPTED.value)
            .filter(Q(from_user_id=user_id) | Q(to_user_id=user_id))
            .order_by("-updated_at")
        )

    @staticmethod
    def pending_incoming(user_id: UUID | str) -> QuerySet[Friendship]:
        """Pending requests addressed to the user, newest first."""
        return (
            Friendship.objects.select_related("from_user", "to_user")
            .filter(to_user_id=user_id, status=FriendshipStatus.PENDING.value)
            .order_by("-created_at")
        )

    @staticmethod
    def pending_outgoing(user_id: UUID | str) -> QuerySet[Friendship]:
        """Pending requests sent by the user, newest first."""
        return (
            Friendship.objects.select_related("from_user", "to_user")
            .filter(from_user_id=user_id, status=FriendshipStatus.PENDING.value)
            .order_by("-created_at")
        )
