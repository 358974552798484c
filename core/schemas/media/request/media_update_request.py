"""Schema for editing a catalog entry."""

from datetime import date

from pydantic import AliasChoices, Field

from core.enums.media import MediaType
from core.schemas.base_schema_model import BaseSchemaModel


class MediaUpdateRequest(BaseSchemaModel):
    """Editable catalog fields. Moderation state is not editable here."""

    media_type: MediaType | None = Field(
        None, validation_alias=AliasChoices("type", "mediaType", "media_type")
    )
    title: str | None = Field(None, min_length=1, max_length=255)
    creator: str | None = Field(None, min_length=1, max_length=255)
    genre: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=5000)
    cover_url: str | None = Field(None, max_length=500)
    release_date: date | None = None
    metadata: str | None = Field(None, max_length=5000)
