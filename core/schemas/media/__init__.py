"""Catalog schemas."""

from core.schemas.media.request import (
    MediaCreateRequest,
    MediaUpdateRequest,
    SubmissionReviewRequest,
)
from core.schemas.media.response import (
    MediaListResponse,
    MediaResponse,
    PendingSubmissionListResponse,
    PendingSubmissionResponse,
)

__all__ = [
    "MediaCreateRequest",
    "MediaListResponse",
    "MediaResponse",
    "MediaUpdateRequest",
    "PendingSubmissionListResponse",
    "PendingSubmissionResponse",
    "SubmissionReviewRequest",
]
