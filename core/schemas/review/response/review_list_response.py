"""Review list response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.review.response.review_response import ReviewResponse


class ReviewListResponse(BaseSchemaModel):
    """Reviews of one catalog entry with summary statistics."""

    reviews: list[ReviewResponse] = Field(...)
    average_rating: float | None = Field(
        None, description="Mean rating rounded to one decimal, null with no reviews"
    )
    total: int = Field(..., ge=0)
