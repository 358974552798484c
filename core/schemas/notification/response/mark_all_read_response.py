"""Schema for the mark-all-read result."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MarkAllReadResponse(BaseSchemaModel):
    """How many notifications were acknowledged."""

    ok: bool = True
    updated: int = Field(..., ge=0, description="Notifications marked read")
