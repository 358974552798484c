"""Test data builders for the core models, backed by Faker."""

from django.contrib.auth.hashers import make_password

from faker import Faker

from core.enums import (
    CollectionStatus,
    FriendshipStatus,
    MediaType,
    NotificationType,
    SubmissionStatus,
    UserRole,
)
from core.models import Friendship, Media, Notification, User, UserMedia

fake = Faker()

DEFAULT_PASSWORD = "correct-horse"


class UserFactory:
    """Builds User rows."""

    @staticmethod
    def create(**overrides) -> User:
        """Create a regular user with a known password."""
        password = overrides.pop("password", DEFAULT_PASSWORD)
        fields = {
            "email": fake.unique.email(),
            "name": fake.name(),
            "password_hash": make_password(password),
            "role": UserRole.USER.value,
        }
        fields.update(overrides)
        return User.objects.create(**fields)

    @staticmethod
    def create_admin(**overrides) -> User:
        """Create an admin user."""
        overrides.setdefault("role", UserRole.ADMIN.value)
        return UserFactory.create(**overrides)


class MediaFactory:
    """Builds catalog entries."""

    @staticmethod
    def create(**overrides) -> Media:
        """Create an APPROVED movie unless told otherwise."""
        fields = {
            "media_type": MediaType.MOVIE.value,
            "title": fake.sentence(nb_words=3).rstrip("."),
            "creator": fake.name(),
            "genre": "Drama",
            "status": SubmissionStatus.APPROVED.value,
        }
        fields.update(overrides)
        return Media.objects.create(**fields)

    @staticmethod
    def create_pending(created_by, **overrides) -> Media:
        """Create a PENDING submission by ``created_by``."""
        overrides.setdefault("status", SubmissionStatus.PENDING.value)
        return MediaFactory.create(created_by=created_by, **overrides)


def create_collection_entry(user, media, status=CollectionStatus.WISHLIST) -> UserMedia:
    """Put ``media`` in ``user``'s collection."""
    return UserMedia.objects.create(user=user, media=media, status=status.value)


def create_friendship(from_user, to_user, status=FriendshipStatus.PENDING) -> Friendship:
    """Create a friendship row from ``from_user`` to ``to_user``."""
    return Friendship.objects.create(
        from_user=from_user, to_user=to_user, status=status.value
    )


def create_notification(
    user, notification_type=NotificationType.FRIEND_REQUEST, **overrides
) -> Notification:
    """Create an unread notification for ``user``."""
    return Notification.objects.create(
        user=user, notification_type=notification_type.value, **overrides
    )
