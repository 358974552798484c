"""Schema for profile updates."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ProfileUpdateRequest(BaseSchemaModel):
    """Fields a user may change on their own profile."""

    name: str | None = Field(None, max_length=200)
    profile_public: bool | None = Field(
        None, description="Whether other users may browse the collection"
    )
