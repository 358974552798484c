"""Schema for account registration."""

from pydantic import Field

from core.constants.limits import PASSWORD_MIN_LENGTH
from core.schemas.base_schema_model import BaseSchemaModel


class RegisterRequest(BaseSchemaModel):
    """Request body for creating an account."""

    email: str = Field(
        ...,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Email address, used to sign in",
    )
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)
    name: str = Field("", max_length=200, description="Display name")
