"""Public summary of a user."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserSummary(BaseSchemaModel):
    """Minimal user information embedded in other responses."""

    user_id: UUID = Field(..., description="Unique identifier for the user")
    name: str = Field("", description="Display name")
    email: str = Field(..., description="Email address")
    image: str | None = Field(None, description="Avatar URL")
