"""Service for accounts: registration, tokens, profiles and administration."""

from typing import Any
from uuid import UUID

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

import structlog

from core.auth.context import RequestContext
from core.auth.jwt_auth import issue_access_token
from core.constants.limits import USER_SEARCH_LIMIT, USER_SEARCH_MIN_QUERY_LENGTH
from core.enums import UserRole
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
)
from core.models import User
from core.repositories import UserRepository
from core.schemas.user import (
    AdminUserListResponse,
    AdminUserResponse,
    RegisterRequest,
    TokenResponse,
    UserProfileResponse,
    UserSearchResponse,
    UserSummary,
)

logger = structlog.get_logger(__name__)

DUPLICATE_EMAIL = "User with this email already exists"
INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    """Service for user accounts."""

    def register(self, request: RegisterRequest) -> UserProfileResponse:
        """Create a regular user account.

        Raises:
            ConflictError: If the email is already registered.
        """
        email = request.email.lower()
        if UserRepository.get_by_email(email) is not None:
            raise ConflictError(DUPLICATE_EMAIL)

        try:
            with transaction.atomic():
                user = User.objects.create(
                    email=email,
                    name=request.name,
                    password_hash=make_password(request.password),
                    role=UserRole.USER.value,
                )
        except IntegrityError as err:
            raise ConflictError(DUPLICATE_EMAIL) from err

        logger.info("user_registered", user_id=str(user.user_id))
        return UserProfileResponse.model_validate(user)

    def issue_token(self, email: str, password: str) -> TokenResponse:
        """Exchange credentials for a bearer access token.

        Unknown emails, wrong passwords and disabled accounts are all
        reported the same way.
        """
        user = UserRepository.get_by_email(email)
        if (
            user is None
            or user.disabled
            or not user.password_hash
            or not check_password(password, user.password_hash)
        ):
            logger.info("token_request_rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token, expires_in = issue_access_token(user)
        logger.info("access_token_issued", user_id=str(user.user_id))
        return TokenResponse(access_token=token, expires_in=expires_in)

    def get_profile(self, ctx: RequestContext) -> UserProfileResponse:
        """The caller's own profile."""
        return UserProfileResponse.model_validate(self._get_caller(ctx))

    def update_profile(
        self, ctx: RequestContext, fields: dict[str, Any]
    ) -> UserProfileResponse:
        """Change the caller's display name and/or profile visibility."""
        user = self._get_caller(ctx)
        changed = []
        if fields.get("name") is not None:
            user.name = fields["name"]
            changed.append("name")
        if fields.get("profile_public") is not None:
            user.profile_public = fields["profile_public"]
            changed.append("profile_public")
        if changed:
            user.save(update_fields=[*changed, "updated_at"])
            logger.info("profile_updated", user_id=str(user.user_id), fields=changed)
        return UserProfileResponse.model_validate(user)

    def search_users(self, ctx: RequestContext, q: str | None) -> UserSearchResponse:
        """Find other enabled users by name or email.

        Queries shorter than two characters return no results.
        """
        user_id = ctx.require_authenticated()
        q = (q or "").strip()
        if len(q) < USER_SEARCH_MIN_QUERY_LENGTH:
            return UserSearchResponse(users=[])
        users = UserRepository.search(q, exclude_user_id=user_id, limit=USER_SEARCH_LIMIT)
        return UserSearchResponse(users=[UserSummary.model_validate(u) for u in users])

    def list_users(self, ctx: RequestContext) -> AdminUserListResponse:
        """All accounts with their submission counts. Admin only."""
        self._require_admin(ctx)
        users = list(UserRepository.list_with_submission_counts())
        return AdminUserListResponse(
            users=[AdminUserResponse.model_validate(u) for u in users],
            total=len(users),
        )

    def set_disabled(
        self, ctx: RequestContext, user_id: UUID | str, disabled: bool
    ) -> AdminUserResponse:
        """Enable or disable a non-admin account."""
        admin_id = self._require_admin(ctx)
        user = self._get_modifiable_user(user_id, "Cannot modify admin")
        user.disabled = disabled
        user.save(update_fields=["disabled", "updated_at"])
        logger.info(
            "user_disabled_changed",
            user_id=str(user.user_id),
            admin_id=admin_id,
            disabled=disabled,
        )
        return AdminUserResponse.model_validate(user)

    def delete_user(self, ctx: RequestContext, user_id: UUID | str) -> None:
        """Delete a non-admin account.

        Their collection, reviews, comments, friendships and notifications go
        with them; their catalog submissions stay with no submitter.
        """
        admin_id = self._require_admin(ctx)
        user = self._get_modifiable_user(user_id, "Cannot delete admin")
        user.delete()
        logger.info("user_deleted", user_id=str(user_id), admin_id=admin_id)

    def _require_admin(self, ctx: RequestContext) -> str:
        user_id = ctx.require_authenticated()
        if not ctx.is_admin:
            raise ForbiddenError("Forbidden")
        return user_id

    def _get_caller(self, ctx: RequestContext) -> User:
        user_id = ctx.require_authenticated()
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            raise NotFoundError("Not found")
        return user

    def _get_modifiable_user(self, user_id: UUID | str, message: str) -> User:
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        if user.is_admin:
            raise ForbiddenError(message)
        return user


# Singleton instance for use throughout the application
user_service = UserService()
