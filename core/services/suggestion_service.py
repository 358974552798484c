"""Service for AI-assisted media suggestions.

A free-text description is sent to a text-generation model which is asked
for a JSON array of real works. The reply is parsed tolerantly, validated
item by item, matched against the catalog and, for works without a known
cover, enriched with cover art from public catalogs.
"""

import re

import structlog
from pydantic import ValidationError

from core.auth.context import RequestContext
from core.constants.limits import AI_DESCRIPTION_MIN_LENGTH, AI_MAX_SUGGESTIONS
from core.exceptions import InvalidInputError, UnprocessableError
from core.models import Media
from core.repositories import MediaRepository
from core.schemas.ai import (
    MediaSuggestion,
    MediaSuggestResponse,
    SuggestedMediaResponse,
)
from core.services.downstream.cover_art_client import cover_art_client
from core.services.downstream.huggingface_client import huggingface_client
from core.utils.tolerant_json import extract_output_text, parse_json_array

logger = structlog.get_logger(__name__)

INSTRUCTIONS = (
    "You are a media database assistant. Reply with ONLY a valid JSON array, "
    "no markdown, no explanation, no extra text. Each item must have these "
    'keys: type ("MOVIE"|"MUSIC"|"GAME"), title (string), creator (string), '
    "genre (string), releaseYear (number), description (string, max 20 words). "
    "Only suggest real, existing works."
)

# Length of the title prefix used for the first catalog lookup
TITLE_LOOKUP_PREFIX = 20
# First words this short are too common to narrow the catalog search
MIN_FIRST_WORD_LENGTH = 4

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def normalise_title(title: str) -> str:
    """Lowercase and strip punctuation for loose title comparison."""
    return _NON_ALNUM_RE.sub("", title.lower()).strip()


class SuggestionService:
    """Service for suggesting catalog entries from a description."""

    def suggest(self, ctx: RequestContext, description: str) -> MediaSuggestResponse:
        """Suggest up to five works matching ``description``.

        Raises:
            InvalidInputError: If the description is too short.
            ServiceNotConfiguredError: If no model token is configured.
            DownstreamServiceUnavailableError: If the model is warming up.
            DownstreamServiceError: If the model call fails otherwise.
            UnprocessableError: If the reply holds no usable suggestion.
        """
        user_id = ctx.require_authenticated()
        description = (description or "").strip()
        if len(description) < AI_DESCRIPTION_MIN_LENGTH:
            raise InvalidInputError("Please describe what you're looking for.")

        logger.info("media_suggestion_requested", user_id=user_id)
        body = huggingface_client.generate(
            INSTRUCTIONS,
            f'Suggest 3 to 5 real media items matching: "{description}"',
        )
        raw = extract_output_text(body)

        suggestions = self.validate_suggestions(parse_json_array(raw))
        if not suggestions:
            logger.warning("media_suggestion_unparseable", raw=raw[:300])
            raise UnprocessableError(
                "The AI didn't return usable suggestions. "
                "Try a more specific description."
            )

        enriched = [self._enrich(ctx, s) for s in suggestions]
        logger.info(
            "media_suggestion_completed", user_id=user_id, count=len(enriched)
        )
        return MediaSuggestResponse(suggestions=enriched, model=huggingface_client.model)

    def validate_suggestions(self, items: list) -> list[MediaSuggestion]:
        """Validate the first few parsed items, dropping unusable ones."""
        suggestions = []
        for item in items[:AI_MAX_SUGGESTIONS]:
            if not isinstance(item, dict):
                continue
            try:
                suggestions.append(MediaSuggestion.model_validate(item))
            except ValidationError:
                logger.debug("media_suggestion_item_dropped", item=str(item)[:200])
        return suggestions

    def find_catalog_match(self, ctx: RequestContext, title: str) -> Media | None:
        """Find a catalog entry the caller can see that looks like ``title``.

        Tries a title prefix first, then entries sharing the first word
        whose normalised title equals or contains the normalised ``title``.
        """
        visible = MediaRepository.visible_to(ctx)
        match = visible.filter(title__icontains=title[:TITLE_LOOKUP_PREFIX]).first()
        if match is not None:
            return match

        normalised = normalise_title(title)
        words = normalised.split()
        if not words or len(words[0]) < MIN_FIRST_WORD_LENGTH:
            return None
        for candidate in visible.filter(title__icontains=words[0]):
            candidate_title = normalise_title(candidate.title)
            if candidate_title == normalised or normalised in candidate_title:
                return candidate
        return None

    def _enrich(
        self, ctx: RequestContext, suggestion: MediaSuggestion
    ) -> SuggestedMediaResponse:
        match = self.find_catalog_match(ctx, suggestion.title)
        image = None
        if match is None or not match.cover_url:
            image = cover_art_client.find_cover(
                suggestion.title, suggestion.creator, suggestion.media_type
            )
        return SuggestedMediaResponse(
            **suggestion.model_dump(),
            existing_id=match.media_id if match else None,
            existing_cover_url=match.cover_url if match else None,
            suggested_image_url=image,
        )


# Singleton instance for use throughout the application
suggestion_service = SuggestionService()
