"""User profile response schema."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums.user_role import UserRole
from core.schemas.base_schema_model import BaseSchemaModel


class UserProfileResponse(BaseSchemaModel):
    """A user's own profile."""

    user_id: UUID = Field(..., description="Unique identifier for the user")
    email: str = Field(..., description="Email address")
    name: str = Field("", description="Display name")
    image: str | None = Field(None, description="Avatar URL")
    role: UserRole = Field(..., description="Account role")
    profile_public: bool = Field(..., description="Whether the collection is public")
    created_at: datetime = Field(..., description="When the account was created")
