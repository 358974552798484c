"""Collection schemas."""

from core.schemas.collection.request import (
    CollectionAddRequest,
    CollectionUpdateRequest,
)
from core.schemas.collection.response import (
    CollectionEntryResponse,
    CollectionListResponse,
    PublicCollectionResponse,
)

__all__ = [
    "CollectionAddRequest",
    "CollectionEntryResponse",
    "CollectionListResponse",
    "CollectionUpdateRequest",
    "PublicCollectionResponse",
]
