"""AI suggestion schemas."""

from core.schemas.ai.media_suggestion import MediaSuggestion
from core.schemas.ai.request import MediaSuggestRequest
from core.schemas.ai.response import MediaSuggestResponse, SuggestedMediaResponse

__all__ = [
    "MediaSuggestRequest",
    "MediaSuggestResponse",
    "MediaSuggestion",
    "SuggestedMediaResponse",
]
