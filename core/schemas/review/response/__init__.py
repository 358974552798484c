"""Review response schemas."""

from core.schemas.review.response.review_list_response import ReviewListResponse
from core.schemas.review.response.review_response import ReviewResponse

__all__ = ["ReviewListResponse", "ReviewResponse"]
