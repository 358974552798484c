"""Tests for FriendshipService."""

from uuid import uuid4

from django.db import IntegrityError, transaction

import pytest

from core.enums import FriendshipStatus, NotificationType, RelationshipStatus
from core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from core.models import Friendship, Notification, make_pair_key
from core.services.friendship_service import FriendshipService
from tests.base import ctx_for
from tests.factories import UserFactory, create_friendship


@pytest.fixture
def service():
    """Create FriendshipService instance."""
    return FriendshipService()


@pytest.fixture
def alice(db):
    """First user."""
    return UserFactory.create(name="Alice")


@pytest.fixture
def bob(db):
    """Second user."""
    return UserFactory.create(name="Bob")


@pytest.mark.django_db
class TestSendRequest:
    """Sending friend requests."""

    def test_send_creates_pending_row_and_notifies(self, service, alice, bob):
        """The recipient gets one FRIEND_REQUEST notification."""
        result = service.send_request(ctx_for(alice), bob.user_id)

        assert result.from_user.user_id == alice.user_id
        assert result.to_user.user_id == bob.user_id
        friendship = Friendship.objects.get()
        assert friendship.status == FriendshipStatus.PENDING.value
        notification = Notification.objects.get(user=bob)
        assert notification.notification_type == NotificationType.FRIEND_REQUEST.value
        assert notification.actor_id == alice.user_id

    def test_cannot_add_yourself(self, service, alice):
        """Self-requests are invalid."""
        with pytest.raises(InvalidInputError, match="Cannot add yourself"):
            service.send_request(ctx_for(alice), alice.user_id)

    def test_unknown_or_disabled_target(self, service, alice):
        """Missing and disabled users are not found."""
        disabled = UserFactory.create(disabled=True)
        for target in (uuid4(), disabled.user_id):
            with pytest.raises(NotFoundError, match="User not found"):
                service.send_request(ctx_for(alice), target)

    def test_duplicate_request(self, service, alice, bob):
        """Sending twice conflicts."""
        service.send_request(ctx_for(alice), bob.user_id)
        with pytest.raises(ConflictError, match="Request already sent"):
            service.send_request(ctx_for(alice), bob.user_id)

    def test_reverse_request_conflicts(self, service, alice, bob):
        """A request back to a pending sender conflicts and adds no row."""
        service.send_request(ctx_for(alice), bob.user_id)

        with pytest.raises(ConflictError, match="already sent you a request"):
            service.send_request(ctx_for(bob), alice.user_id)

        assert Friendship.objects.count() == 1
        assert Notification.objects.filter(user=alice).count() == 0

    def test_already_friends(self, service, alice, bob):
        """Friends cannot request each other again in either direction."""
        create_friendship(alice, bob, FriendshipStatus.ACCEPTED)
        with pytest.raises(ConflictError, match="Already friends"):
            service.send_request(ctx_for(bob), alice.user_id)

    def test_pair_key_is_unique_per_pair(self, alice, bob):
        """The database refuses a second row for the same pair."""
        forward = create_friendship(alice, bob)
        assert forward.pair_key == make_pair_key(bob.user_id, alice.user_id)

        with pytest.raises(IntegrityError), transaction.atomic():
            create_friendship(bob, alice)


@pytest.mark.django_db
class TestAnswerRequest:
    """Accepting and declining."""

    def test_accept(self, service, alice, bob):
        """Accepting makes them friends and notifies the sender."""
        request = create_friendship(alice, bob)

        service.accept(ctx_for(bob), request.friendship_id)

        request.refresh_from_db()
        assert request.status == FriendshipStatus.ACCEPTED.value
        notification = Notification.objects.get(user=alice)
        assert notification.notification_type == NotificationType.FRIEND_ACCEPTED.value
        assert notification.actor_id == bob.user_id

    def test_sender_cannot_accept(self, service, alice, bob):
        """Only the recipient answers a request."""
        request = create_friendship(alice, bob)
        with pytest.raises(ForbiddenError, match="Not your request"):
            service.accept(ctx_for(alice), request.friendship_id)

    def test_accept_twice(self, service, alice, bob):
        """A handled request cannot be accepted again."""
        request = create_friendship(alice, bob)
        service.accept(ctx_for(bob), request.friendship_id)

        with pytest.raises(ConflictError, match="Already handled"):
            service.accept(ctx_for(bob), request.friendship_id)
        assert Notification.objects.filter(user=alice).count() == 1

    def test_accept_missing(self, service, bob):
        """Unknown requests are 404."""
        with pytest.raises(NotFoundError, match="Request not found"):
            service.accept(ctx_for(bob), uuid4())

    def test_decline_deletes_row(self, service, alice, bob):
        """Declining removes the request so it can be sent again."""
        request = create_friendship(alice, bob)

        service.decline(ctx_for(bob), request.friendship_id)

        assert Friendship.objects.count() == 0
        service.send_request(ctx_for(alice), bob.user_id)
        assert Friendship.objects.count() == 1


@pytest.mark.django_db
class TestListing:
    """Friend lists, request lists and relationship status."""

    def test_list_friends_shows_other_user(self, service, alice, bob):
        """Each friend entry shows the other side of the pair."""
        create_friendship(alice, bob, FriendshipStatus.ACCEPTED)

        assert service.list_friends(ctx_for(alice)).friends[0].user.name == "Bob"
        assert service.list_friends(ctx_for(bob)).friends[0].user.name == "Alice"

    def test_list_requests(self, service, alice, bob):
        """Incoming and outgoing pending requests are split."""
        create_friendship(alice, bob)

        assert len(service.list_requests(ctx_for(alice)).outgoing) == 1
        incoming = service.list_requests(ctx_for(bob)).incoming
        assert [r.from_user.name for r in incoming] == ["Alice"]

    def test_status_with(self, service, alice, bob):
        """Status reflects who sent the pending request."""
        assert (
            service.status_with(ctx_for(alice), alice.user_id).status
            == RelationshipStatus.SELF.value
        )
        assert (
            service.status_with(ctx_for(alice), bob.user_id).status
            == RelationshipStatus.NONE.value
        )

        request = create_friendship(alice, bob)
        sent = service.status_with(ctx_for(alice), bob.user_id)
        received = service.status_with(ctx_for(bob), alice.user_id)
        assert sent.status == RelationshipStatus.PENDING_SENT.value
        assert received.status == RelationshipStatus.PENDING_RECEIVED.value
        assert received.request_id == request.friendship_id

        service.accept(ctx_for(bob), request.friendship_id)
        assert (
            service.status_with(ctx_for(alice), bob.user_id).status
            == RelationshipStatus.FRIENDS.value
        )
