"""Third-party service clients package."""

from core.services.downstream.cover_art_client import (
    CoverArtClient,
    cover_art_client,
)
from core.services.downstream.huggingface_client import (
    HuggingFaceClient,
    huggingface_client,
)

__all__ = [
    "CoverArtClient",
    "HuggingFaceClient",
    "cover_art_client",
    "huggingface_client",
]
