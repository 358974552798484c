"""Schema for access token requests."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class TokenRequest(BaseSchemaModel):
    """Credentials exchanged for an access token."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
