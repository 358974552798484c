"""Schema for writing a review."""

from pydantic import Field

from core.constants.limits import REVIEW_BODY_MAX_LENGTH
from core.schemas.base_schema_model import BaseSchemaModel


class ReviewCreateRequest(BaseSchemaModel):
    """Request body for reviewing a catalog entry."""

    rating: int = Field(..., ge=1, le=5, description="Star rating from 1 to 5")
    body: str | None = Field(None, max_length=REVIEW_BODY_MAX_LENGTH)
