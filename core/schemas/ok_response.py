"""Generic acknowledgement schema."""

from core.schemas.base_schema_model import BaseSchemaModel


class OkResponse(BaseSchemaModel):
    """Body returned by actions that have nothing else to report."""

    ok: bool = True
