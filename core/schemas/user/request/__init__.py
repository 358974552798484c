"""User request schemas."""

from core.schemas.user.request.admin_user_update_request import (
    AdminUserUpdateRequest,
)
from core.schemas.user.request.profile_update_request import ProfileUpdateRequest
from core.schemas.user.request.register_request import RegisterRequest
from core.schemas.user.request.token_request import TokenRequest

__all__ = [
    "AdminUserUpdateRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "TokenRequest",
]
