"""Notification enumerations."""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of in-app notification.

    Each type maps to a title/message template used when rendering the
    inbox.
    """

    MEDIA_APPROVED = "MEDIA_APPROVED"
    MEDIA_REJECTED = "MEDIA_REJECTED"
    FRIEND_REQUEST = "FRIEND_REQUEST"
    FRIEND_ACCEPTED = "FRIEND_ACCEPTED"
