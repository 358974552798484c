"""Schema for writing or editing a comment."""

from pydantic import Field

from core.constants.limits import COMMENT_BODY_MAX_LENGTH
from core.schemas.base_schema_model import BaseSchemaModel


class CommentRequest(BaseSchemaModel):
    """Request body for creating or editing a comment."""

    body: str = Field(..., min_length=1, max_length=COMMENT_BODY_MAX_LENGTH)
