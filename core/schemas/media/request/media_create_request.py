"""Schema for catalog submissions."""

from datetime import date

from pydantic import AliasChoices, ConfigDict, Field

from core.enums.media import CollectionStatus, MediaType
from core.schemas.base_schema_model import BaseSchemaModel


class MediaCreateRequest(BaseSchemaModel):
    """Request body for submitting a new catalog entry.

    Entries submitted by admins are approved immediately; everyone else's
    start PENDING. ``add_to_collection`` also puts the new entry in the
    submitter's collection with ``initial_status``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "MOVIE",
                "title": "Dune",
                "creator": "Denis Villeneuve",
                "genre": "Science Fiction",
                "releaseDate": "2021-10-22",
                "addToCollection": True,
                "initialStatus": "WISHLIST",
            }
        }
    )

    media_type: MediaType = Field(
        ...,
        validation_alias=AliasChoices("type", "mediaType", "media_type"),
        description="Kind of work",
    )
    title: str = Field(..., min_length=1, max_length=255)
    creator: str = Field(..., min_length=1, max_length=255)
    genre: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=5000)
    cover_url: str | None = Field(None, max_length=500)
    release_date: date | None = None
    metadata: str | None = Field(None, max_length=5000)
    add_to_collection: bool = False
    initial_status: CollectionStatus = CollectionStatus.OWNED
