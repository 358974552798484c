"""Enumerations for the core app."""

from core.enums.friendship import FriendshipStatus, RelationshipStatus
from core.enums.health_status import HealthStatus
from core.enums.media import (
    CollectionStatus,
    MediaType,
    ReviewAction,
    SubmissionStatus,
)
from core.enums.notification import NotificationType
from core.enums.user_role import UserRole

__all__ = [
    "CollectionStatus",
    "FriendshipStatus",
    "HealthStatus",
    "MediaType",
    "NotificationType",
    "RelationshipStatus",
    "ReviewAction",
    "SubmissionStatus",
    "UserRole",
]
