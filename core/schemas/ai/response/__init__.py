"""AI response schemas."""

from core.schemas.ai.response.media_suggest_response import MediaSuggestResponse
from core.schemas.ai.response.suggested_media_response import SuggestedMediaResponse

__all__ = ["MediaSuggestResponse", "SuggestedMediaResponse"]
