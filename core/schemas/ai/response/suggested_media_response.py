"""Enriched suggestion response schema."""

from uuid import UUID

from pydantic import Field

from core.schemas.ai.media_suggestion import MediaSuggestion


class SuggestedMediaResponse(MediaSuggestion):
    """A suggestion matched against the catalog and enriched with cover art."""

    existing_id: UUID | None = Field(None, description="Matching catalog entry")
    existing_cover_url: str | None = Field(None, description="Its cover, if any")
    suggested_image_url: str | None = Field(
        None, description="Cover art found online when the catalog has none"
    )
