"""Tests for UserService."""

from uuid import uuid4

import pytest

from core.enums import UserRole
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
)
from core.models import Media, User
from core.schemas.user import RegisterRequest
from core.services.user_service import UserService
from tests.base import ctx_for
from tests.factories import DEFAULT_PASSWORD, MediaFactory, UserFactory


@pytest.fixture
def service():
    """Create UserService instance."""
    return UserService()


@pytest.mark.django_db
class TestAccounts:
    """Registration, tokens and profiles."""

    def test_register(self, service):
        """New accounts are regular users with a hashed password."""
        profile = service.register(
            RegisterRequest(email="New.User@Example.com", password="secret1", name="New")
        )

        user = User.objects.get(user_id=profile.user_id)
        assert user.email == "new.user@example.com"
        assert user.role == UserRole.USER.value
        assert user.password_hash != "secret1"

    def test_register_duplicate_email(self, service, user):
        """Emails are unique regardless of case."""
        with pytest.raises(ConflictError):
            service.register(
                RegisterRequest(
                    email=user.email.upper(), password="secret1", name="Dup"
                )
            )

    def test_issue_token(self, service, user):
        """Correct credentials yield a bearer token."""
        token = service.issue_token(user.email, DEFAULT_PASSWORD)

        assert token.access_token
        assert token.token_type == "Bearer"
        assert token.expires_in > 0

    def test_issue_token_rejections(self, service, user):
        """Wrong passwords, unknown emails and disabled accounts look alike."""
        disabled = UserFactory.create(disabled=True)
        for email, password in (
            (user.email, "wrong-password"),
            ("nobody@example.com", DEFAULT_PASSWORD),
            (disabled.email, DEFAULT_PASSWORD),
        ):
            with pytest.raises(AuthenticationError, match="Invalid email or password"):
                service.issue_token(email, password)

    def test_update_profile(self, service, user):
        """Name and visibility can be changed; nulls are ignored."""
        profile = service.update_profile(
            ctx_for(user), {"name": "Renamed", "profile_public": True}
        )
        assert profile.name == "Renamed"
        assert profile.profile_public is True

        profile = service.update_profile(ctx_for(user), {"name": None})
        assert profile.name == "Renamed"

    def test_search_users(self, service, user):
        """Search skips the caller, disabled users and short queries."""
        match = UserFactory.create(name="Zelda Fitzgerald")
        UserFactory.create(name="Zelda Disabled", disabled=True)
        user.name = "Zelda Caller"
        user.save()

        result = service.search_users(ctx_for(user), "zelda")

        assert [u.user_id for u in result.users] == [match.user_id]
        assert service.search_users(ctx_for(user), "z").users == []


@pytest.mark.django_db
class TestAdministration:
    """Admin-only account management."""

    def test_list_users_counts_submissions(self, service, admin_user, user):
        """Each account carries its submission count."""
        MediaFactory.create_pending(user)
        MediaFactory.create_pending(user)

        result = service.list_users(ctx_for(admin_user))

        counts = {u.user_id: u.submission_count for u in result.users}
        assert counts[user.user_id] == 2
        assert counts[admin_user.user_id] == 0

    def test_non_admin_forbidden(self, service, user):
        """Regular users cannot manage accounts."""
        other = UserFactory.create()
        with pytest.raises(ForbiddenError):
            service.list_users(ctx_for(user))
        with pytest.raises(ForbiddenError):
            service.set_disabled(ctx_for(user), other.user_id, True)

    def test_disable_user(self, service, admin_user, user):
        """Admins can disable regular accounts."""
        result = service.set_disabled(ctx_for(admin_user), user.user_id, True)

        assert result.disabled is True
        user.refresh_from_db()
        assert user.disabled

    def test_admins_are_protected(self, service, admin_user):
        """Admin accounts cannot be disabled or deleted."""
        other_admin = UserFactory.create_admin()
        with pytest.raises(ForbiddenError, match="Cannot modify admin"):
            service.set_disabled(ctx_for(admin_user), other_admin.user_id, True)
        with pytest.raises(ForbiddenError, match="Cannot delete admin"):
            service.delete_user(ctx_for(admin_user), other_admin.user_id)

    def test_delete_user_keeps_submissions(self, service, admin_user, user):
        """Deleted users' submissions remain without a submitter."""
        media = MediaFactory.create_pending(user)

        service.delete_user(ctx_for(admin_user), user.user_id)

        assert not User.objects.filter(user_id=user.user_id).exists()
        assert Media.objects.get(media_id=media.media_id).created_by_id is None

    def test_delete_missing_user(self, service, admin_user):
        """Unknown accounts are 404."""
        with pytest.raises(NotFoundError):
            service.delete_user(ctx_for(admin_user), uuid4())
