"""Schema for updating a collection entry."""

from pydantic import Field

from core.enums.media import CollectionStatus
from core.schemas.base_schema_model import BaseSchemaModel


class CollectionUpdateRequest(BaseSchemaModel):
    """Status and notes of a collection entry; omitted fields are unchanged."""

    status: CollectionStatus | None = None
    notes: str | None = Field(None, max_length=2000)
