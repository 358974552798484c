"""User search response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class UserSearchResponse(BaseSchemaModel):
    """Users matching a search query."""

    users: list[UserSummary] = Field(..., description="Matching users")
