"""User and account schemas."""

from core.schemas.user.request import (
    AdminUserUpdateRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    TokenRequest,
)
from core.schemas.user.response import (
    AdminUserListResponse,
    AdminUserResponse,
    TokenResponse,
    UserProfileResponse,
    UserSearchResponse,
)
from core.schemas.user.user_summary import UserSummary

__all__ = [
    "AdminUserListResponse",
    "AdminUserResponse",
    "AdminUserUpdateRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "TokenRequest",
    "TokenResponse",
    "UserProfileResponse",
    "UserSearchResponse",
    "UserSummary",
]
