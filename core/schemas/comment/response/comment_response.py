"""Comment response schema."""

from datetime import datetime
from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class CommentResponse(BaseSchemaModel):
    """A comment on a catalog entry."""

    comment_id: UUID
    media_id: UUID
    user: UserSummary
    body: str
    created_at: datetime
    updated_at: datetime
