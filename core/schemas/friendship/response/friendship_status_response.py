"""Relationship status schema."""

from uuid import UUID

from pydantic import Field

from core.enums.friendship import RelationshipStatus
from core.schemas.base_schema_model import BaseSchemaModel


class FriendshipStatusResponse(BaseSchemaModel):
    """How the caller relates to another user."""

    status: RelationshipStatus
    request_id: UUID | None = Field(
        None, description="Pending request between the two users, if any"
    )
