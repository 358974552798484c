"""Schema for adding an item to a collection."""

from uuid import UUID

from pydantic import Field

from core.enums.media import CollectionStatus
from core.schemas.base_schema_model import BaseSchemaModel


class CollectionAddRequest(BaseSchemaModel):
    """Request body for adding a catalog entry to the caller's collection."""

    media_id: UUID = Field(..., description="Catalog entry to add")
    status: CollectionStatus = Field(
        CollectionStatus.WISHLIST, description="Initial collection status"
    )
    notes: str | None = Field(None, max_length=2000)
