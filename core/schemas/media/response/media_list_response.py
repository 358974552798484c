"""Catalog list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.media.response.media_response import MediaResponse


class MediaListResponse(BaseSchemaModel):
    """A list of catalog entries."""

    media: list[MediaResponse] = Field(..., description="Catalog entries")
    total: int = Field(..., ge=0)
