"""Schema for one suggestion produced by the language model.

Model output is untrusted: each item is validated like a request body and
dropped when it does not carry at least a title and a creator.
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from core.enums.media import MediaType
from core.schemas.base_schema_model import BaseSchemaModel


class MediaSuggestion(BaseSchemaModel):
    """A media item suggested by the model."""

    media_type: MediaType = Field(
        MediaType.GAME, validation_alias=AliasChoices("type", "mediaType")
    )
    title: str = Field(..., min_length=1, max_length=255)
    creator: str = Field(..., min_length=1, max_length=255)
    genre: str = Field("", max_length=100)
    release_year: int | None = None
    description: str = Field("", max_length=1000)

    @field_validator("media_type", mode="before")
    @classmethod
    def coerce_media_type(cls, value: Any) -> str:
        """Unknown or missing types fall back to GAME."""
        if isinstance(value, str) and value.upper() in MediaType.__members__:
            return value.upper()
        return MediaType.GAME.value

    @field_validator("release_year", mode="before")
    @classmethod
    def coerce_release_year(cls, value: Any) -> int | None:
        """Keep plausible years only."""
        try:
            year = int(value)
        except (TypeError, ValueError):
            return None
        return year if 1800 <= year <= 2200 else None

    @field_validator("genre", "description", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        """Non-string free text is discarded."""
        return value if isinstance(value, str) else ""
