"""Friendship enumerations."""

from enum import Enum


class FriendshipStatus(str, Enum):
    """State of a friend request row."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"


class RelationshipStatus(str, Enum):
    """Relationship between the caller and another user, as seen by the caller."""

    SELF = "self"
    NONE = "none"
    FRIENDS = "friends"
    PENDING_SENT = "pending_sent"
    PENDING_RECEIVED = "pending_received"
