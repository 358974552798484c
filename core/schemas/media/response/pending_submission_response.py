"""Pending submission response schema."""

from pydantic import Field

from core.schemas.media.response.media_response import MediaResponse
from core.schemas.user.user_summary import UserSummary


class PendingSubmissionResponse(MediaResponse):
    """A submission awaiting moderation, with who submitted it."""

    created_by: UserSummary | None = Field(None, description="Submitter summary")
