"""Comment list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.comment.response.comment_response import CommentResponse


class CommentListResponse(BaseSchemaModel):
    """Comments on one catalog entry, oldest first."""

    comments: list[CommentResponse] = Field(...)
    total: int = Field(..., ge=0)
