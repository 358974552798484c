"""Review schemas."""

from core.schemas.review.request import ReviewCreateRequest, ReviewUpdateRequest
from core.schemas.review.response import ReviewListResponse, ReviewResponse

__all__ = [
    "ReviewCreateRequest",
    "ReviewListResponse",
    "ReviewResponse",
    "ReviewUpdateRequest",
]
