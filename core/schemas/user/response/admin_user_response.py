"""Admin view of a user account."""

from pydantic import Field

from core.schemas.user.response.user_profile_response import UserProfileResponse


class AdminUserResponse(UserProfileResponse):
    """Profile plus moderation fields, returned by admin endpoints."""

    disabled: bool = Field(..., description="Whether the account is disabled")
    submission_count: int = Field(0, ge=0, description="Catalog entries submitted")
