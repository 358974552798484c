"""Collection request schemas."""

from core.schemas.collection.request.collection_add_request import (
    CollectionAddRequest,
)
from core.schemas.collection.request.collection_update_request import (
    CollectionUpdateRequest,
)

__all__ = ["CollectionAddRequest", "CollectionUpdateRequest"]
