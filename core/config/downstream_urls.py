"""Third-party service URL configuration."""

# HuggingFace Responses API router, used for AI media suggestions
HUGGINGFACE_ROUTER_URL = "https://router.huggingface.co/v1/responses"

# Cover art sources
ITUNES_SEARCH_URL = "https://itunes.apple.com/search"
STEAM_STORE_SEARCH_URL = "https://store.steampowered.com/api/storesearch/"
STEAM_LIBRARY_COVER_URL = (
    "https://cdn.akamai.steamstatic.com/steam/apps/{app_id}/library_600x900.jpg"
)
RAWG_GAMES_URL = "https://api.rawg.io/api/games"
