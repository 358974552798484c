"""Schema for moderating a submission."""

from pydantic import Field

from core.enums.media import ReviewAction
from core.schemas.base_schema_model import BaseSchemaModel


class SubmissionReviewRequest(BaseSchemaModel):
    """Admin decision on a pending catalog entry."""

    action: ReviewAction = Field(..., description="approve or reject")
    rejection_note: str | None = Field(
        None, max_length=1000, description="Shown to the submitter on reject"
    )
