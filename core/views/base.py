"""Shared helpers for API views."""

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.response import Response

from core.exceptions import InvalidInputError
from core.schemas import OkResponse

logger = structlog.get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_body(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate a request body with a pydantic schema.

    Raises:
        InvalidInputError: With the validation errors as details.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        logger.warning(
            "Invalid request body",
            schema=schema.__name__,
            validation_errors=errors,
        )
        raise InvalidInputError("Invalid input", details=errors) from e


def schema_response(
    model: BaseModel, status_code: int = status.HTTP_200_OK
) -> Response:
    """Serialize a response schema with camelCase keys."""
    return Response(model.model_dump(by_alias=True, mode="json"), status=status_code)


def ok_response() -> Response:
    """Plain acknowledgement body."""
    return schema_response(OkResponse())


def query_flag(value: str | None) -> bool:
    """Interpret a boolean query parameter."""
    return (value or "").strip().lower() in ("1", "true", "yes")
