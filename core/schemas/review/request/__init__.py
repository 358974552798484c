"""Review request schemas."""

from core.schemas.review.request.review_create_request import ReviewCreateRequest
from core.schemas.review.request.review_update_request import ReviewUpdateRequest

__all__ = ["ReviewCreateRequest", "ReviewUpdateRequest"]
