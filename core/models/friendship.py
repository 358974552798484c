"""Friendship model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import FriendshipStatus


def make_pair_key(first_user_id, second_user_id) -> str:
    """Build an order-independent key for a pair of users."""
    low, high = sorted((str(first_user_id), str(second_user_id)))
    return f"{low}:{high}"


class Friendship(models.Model):
    """A friend request from one user to another.

    The row is directed while PENDING and becomes a symmetric friendship
    once ACCEPTED. ``pair_key`` is unique, so at most one row can exist per
    unordered pair of users regardless of who sent the request.
    """

    friendship_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    from_user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="sent_friend_requests",
        db_column="from_user_id",
    )
    to_user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="received_friend_requests",
        db_column="to_user_id",
    )
    status = models.CharField(
        max_length=10,
        choices=[(s.value, s.value) for s in FriendshipStatus],
        default=FriendshipStatus.PENDING.value,
    )
    pair_key = models.CharField(max_length=80, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "friendships"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["to_user", "status"]),
            models.Index(fields=["from_user", "status"]),
        ]

    def save(self, *args, **kwargs):
        """Derive the pair key before saving."""
        self.pair_key = make_pair_key(self.from_user_id, self.to_user_id)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        """Return string representation of the friendship."""
        return f"{self.from_user_id} -> {self.to_user_id} ({self.status})"

    def __repr__(self) -> str:
        """Return detailed representation of the friendship."""
        return (
            f"<Friendship(id={self.friendship_id}, "
            f"from={self.from_user_id}, "
            f"to={self.to_user_id}, "
            f"status={self.status})>"
        )
