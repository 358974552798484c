"""Admin user list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.response.admin_user_response import AdminUserResponse


class AdminUserListResponse(BaseSchemaModel):
    """All accounts, newest first."""

    users: list[AdminUserResponse] = Field(..., description="User accounts")
    total: int = Field(..., ge=0)
