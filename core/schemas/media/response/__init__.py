"""Catalog response schemas."""

from core.schemas.media.response.media_list_response import MediaListResponse
from core.schemas.media.response.media_response import MediaResponse
from core.schemas.media.response.pending_submission_list_response import (
    PendingSubmissionListResponse,
)
from core.schemas.media.response.pending_submission_response import (
    PendingSubmissionResponse,
)

__all__ = [
    "MediaListResponse",
    "MediaResponse",
    "PendingSubmissionListResponse",
    "PendingSubmissionResponse",
]
