"""User response schemas."""

from core.schemas.user.response.admin_user_list_response import (
    AdminUserListResponse,
)
from core.schemas.user.response.admin_user_response import AdminUserResponse
from core.schemas.user.response.token_response import TokenResponse
from core.schemas.user.response.user_profile_response import UserProfileResponse
from core.schemas.user.response.user_search_response import UserSearchResponse

__all__ = [
    "AdminUserListResponse",
    "AdminUserResponse",
    "TokenResponse",
    "UserProfileResponse",
    "UserSearchResponse",
]
