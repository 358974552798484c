"""Data access helpers shared by services."""

from core.repositories.friendship_repository import FriendshipRepository
from core.repositories.media_repository import MediaRepository
from core.repositories.user_repository import UserRepository

__all__ = ["FriendshipRepository", "MediaRepository", "UserRepository"]
