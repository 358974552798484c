"""Access token response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class TokenResponse(BaseSchemaModel):
    """Bearer token issued for valid credentials."""

    access_token: str = Field(..., description="Signed JWT access token")
    token_type: str = Field("Bearer", description="Token type")
    expires_in: int = Field(..., ge=1, description="Lifetime in seconds")
