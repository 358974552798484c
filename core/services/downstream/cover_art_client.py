"""Client for looking up cover art on public catalogs.

Games are looked up on RAWG (when an API key is configured) and then on
the Steam store; music and movies on iTunes. Lookups are best effort:
any failure yields no image.
"""

from django.conf import settings

import requests
import structlog

from core.config.downstream_urls import (
    ITUNES_SEARCH_URL,
    RAWG_GAMES_URL,
    STEAM_LIBRARY_COVER_URL,
    STEAM_STORE_SEARCH_URL,
)
from core.enums import MediaType
from core.exceptions import DownstreamServiceError
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)

# Prefix of the title used to pick the closest search result
TITLE_MATCH_PREFIX = 15


class CoverArtClient(BaseDownstreamClient):
    """Finds a cover image URL for a title."""

    def __init__(self):
        """Initialize cover art client with service configuration."""
        super().__init__(service_name="cover-art", base_url="", timeout=5)

    def find_cover(self, title: str, creator: str, media_type: str) -> str | None:
        """Return the best cover image URL for a work, or None.

        Args:
            title: Title of the work
            creator: Director, artist or studio
            media_type: MOVIE, MUSIC or GAME
        """
        if media_type == MediaType.GAME.value:
            return self.find_rawg_cover(title) or self.find_steam_cover(title)
        if media_type == MediaType.MUSIC.value:
            return self.find_itunes_cover(title, creator, "album", "music")
        return self.find_itunes_cover(title, creator, "movie", "movie")

    def find_rawg_cover(self, title: str) -> str | None:
        """Background image of the closest RAWG game, if a key is configured."""
        if not settings.RAWG_API_KEY:
            return None
        data = self._search(
            RAWG_GAMES_URL,
            {"search": title, "key": settings.RAWG_API_KEY, "page_size": 3},
        )
        results = data.get("results") or []
        best = _closest(results, title, lambda r: r.get("name"))
        return best.get("background_image") if best else None

    def find_steam_cover(self, title: str) -> str | None:
        """Portrait library cover of the closest Steam store match."""
        data = self._search(
            STEAM_STORE_SEARCH_URL, {"term": title, "cc": "us", "l": "en"}
        )
        items = data.get("items") or []
        best = _closest(items, title, lambda i: i.get("name"))
        if not best or best.get("id") is None:
            return None
        return STEAM_LIBRARY_COVER_URL.format(app_id=best["id"])

    def find_itunes_cover(
        self, title: str, creator: str, entity: str, media: str
    ) -> str | None:
        """Large artwork of the closest iTunes match."""
        data = self._search(
            ITUNES_SEARCH_URL,
            {
                "term": f"{title} {creator}",
                "entity": entity,
                "media": media,
                "limit": 3,
            },
        )
        results = data.get("results") or []
        best = _closest(
            results, title, lambda r: r.get("trackName") or r.get("collectionName")
        )
        artwork = best.get("artworkUrl100") if best else None
        if not artwork:
            return None
        return artwork.replace("100x100bb", "512x512bb")

    def _search(self, url: str, params: dict) -> dict:
        """GET a search endpoint, returning an empty result on any failure."""
        try:
            response = self._make_request("GET", url, params=params)
            if response.status_code != 200:
                return {}
            data = response.json()
        except (requests.RequestException, DownstreamServiceError, ValueError) as e:
            logger.warning("cover_art_lookup_failed", url=url, error=str(e))
            return {}
        return data if isinstance(data, dict) else {}


def _closest(items: list, title: str, name_of) -> dict | None:
    """First item whose name contains the start of ``title``, else the first."""
    items = [i for i in items if isinstance(i, dict)]
    if not items:
        return None
    prefix = title.lower()[:TITLE_MATCH_PREFIX]
    for item in items:
        if prefix in (name_of(item) or "").lower():
            return item
    return items[0]


# Singleton instance for use throughout the application
cover_art_client = CoverArtClient()
