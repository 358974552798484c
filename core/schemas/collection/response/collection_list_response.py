"""Collection list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.collection.response.collection_entry_response import (
    CollectionEntryResponse,
)


class CollectionListResponse(BaseSchemaModel):
    """A user's collection, most recently added first."""

    entries: list[CollectionEntryResponse] = Field(...)
    total: int = Field(..., ge=0)
