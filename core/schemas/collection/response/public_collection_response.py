"""Public collection response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.collection.response.collection_entry_response import (
    CollectionEntryResponse,
)
from core.schemas.user.user_summary import UserSummary


class PublicCollectionResponse(BaseSchemaModel):
    """A user's collection as shown on their public profile."""

    user: UserSummary
    entries: list[CollectionEntryResponse] = Field(...)
    total: int = Field(..., ge=0)
