"""Schema for AI media suggestion requests."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MediaSuggestRequest(BaseSchemaModel):
    """Free-text description of what the user is looking for."""

    description: str = Field("", max_length=1000)
