"""Review response schema."""

from datetime import datetime
from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class ReviewResponse(BaseSchemaModel):
    """A review of a catalog entry."""

    review_id: UUID
    media_id: UUID
    user: UserSummary
    rating: int
    body: str | None = None
    created_at: datetime
    updated_at: datetime
