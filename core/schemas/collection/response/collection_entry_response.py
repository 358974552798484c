"""Collection entry response schema."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums.media import CollectionStatus
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.media.response.media_response import MediaResponse


class CollectionEntryResponse(BaseSchemaModel):
    """One item in a user's collection."""

    entry_id: UUID = Field(..., description="Unique identifier for the entry")
    media: MediaResponse = Field(..., description="The catalog entry")
    status: CollectionStatus
    notes: str | None = None
    added_at: datetime
    completed_at: datetime | None = Field(
        None, description="Set while the status is COMPLETED"
    )
