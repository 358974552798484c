"""Moderation queue response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.media.response.pending_submission_response import (
    PendingSubmissionResponse,
)


class PendingSubmissionListResponse(BaseSchemaModel):
    """Submissions awaiting moderation, newest first."""

    submissions: list[PendingSubmissionResponse] = Field(...)
    total: int = Field(..., ge=0)
