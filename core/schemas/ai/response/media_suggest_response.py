"""AI media suggestion response schema."""

from pydantic import Field

from core.schemas.ai.response.suggested_media_response import SuggestedMediaResponse
from core.schemas.base_schema_model import BaseSchemaModel


class MediaSuggestResponse(BaseSchemaModel):
    """Suggestions for a description and the model that produced them."""

    suggestions: list[SuggestedMediaResponse] = Field(...)
    model: str = Field(..., description="Text-generation model used")
