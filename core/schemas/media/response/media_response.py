"""Catalog entry response schema."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from core.enums.media import MediaType, SubmissionStatus
from core.schemas.base_schema_model import BaseSchemaModel


class MediaResponse(BaseSchemaModel):
    """A catalog entry as returned by the API."""

    media_id: UUID = Field(..., description="Unique identifier for the entry")
    media_type: MediaType = Field(..., description="Kind of work")
    title: str
    creator: str
    genre: str | None = None
    description: str | None = None
    cover_url: str | None = None
    release_date: date | None = None
    metadata: str | None = None
    status: SubmissionStatus = Field(..., description="Moderation state")
    rejection_note: str | None = None
    created_by_id: UUID | None = Field(None, description="Submitter, if known")
    created_at: datetime
    updated_at: datetime
