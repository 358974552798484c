"""Schema for editing a review."""

from pydantic import Field

from core.constants.limits import REVIEW_BODY_MAX_LENGTH
from core.schemas.base_schema_model import BaseSchemaModel


class ReviewUpdateRequest(BaseSchemaModel):
    """Omitted fields are left unchanged."""

    rating: int | None = Field(None, ge=1, le=5)
    body: str | None = Field(None, max_length=REVIEW_BODY_MAX_LENGTH)
