"""Schema for admin account updates."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class AdminUserUpdateRequest(BaseSchemaModel):
    """Request body for enabling or disabling an account."""

    disabled: bool = Field(..., description="Whether the account is disabled")
