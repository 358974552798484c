"""Database models for core application."""

from core.models.comment import Comment
from core.models.friendship import Friendship, make_pair_key
from core.models.media import Media
from core.models.notification import Notification
from core.models.review import Review
from core.models.user import User
from core.models.user_media import UserMedia

__all__ = [
    "Comment",
    "Friendship",
    "Media",
    "Notification",
    "Review",
    "User",
    "UserMedia",
    "make_pair_key",
]
