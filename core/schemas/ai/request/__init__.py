"""AI request schemas."""

from core.schemas.ai.request.media_suggest_request import MediaSuggestRequest

__all__ = ["MediaSuggestRequest"]
