"""Catalog request schemas."""

from core.schemas.media.request.media_create_request import MediaCreateRequest
from core.schemas.media.request.media_update_request import MediaUpdateRequest
from core.schemas.media.request.submission_review_request import (
    SubmissionReviewRequest,
)

__all__ = ["MediaCreateRequest", "MediaUpdateRequest", "SubmissionReviewRequest"]
