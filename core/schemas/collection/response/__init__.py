"""Collection response schemas."""

from core.schemas.collection.response.collection_entry_response import (
    CollectionEntryResponse,
)
from core.schemas.collection.response.collection_list_response import (
    CollectionListResponse,
)
from core.schemas.collection.response.public_collection_response import (
    PublicCollectionResponse,
)

__all__ = [
    "CollectionEntryResponse",
    "CollectionListResponse",
    "PublicCollectionResponse",
]
