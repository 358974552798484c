"""Global exception handler for the API.

Every error reaches the client as ``{"error": "<message>"}``, with
``details`` added for validation failures and ``retryable`` for transient
third-party outages.
"""

import logging
import traceback
from typing import Any

from django.conf import settings

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.domain_exceptions import LibraryError
from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Convert an exception raised by a view into an error response.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response with the standard error body.
    """
    view = context.get("view")
    request = getattr(view, "request", None) or context.get("request")
    request_id = get_request_id()

    if isinstance(exc, LibraryError):
        response = Response(
            _error_body(exc.message, exc.details), status=exc.status_code
        )
    elif isinstance(exc, DownstreamServiceError):
        body = _error_body(exc.message)
        if isinstance(exc, DownstreamServiceUnavailableError):
            body["retryable"] = True
        response = Response(body, status=exc.status_code)
    else:
        # DRF handles its own exceptions plus Http404 and PermissionDenied
        response = exception_handler(exc, context)
        if response is not None:
            response.data = _reshape_drf_body(response.data)
        else:
            response = Response(
                _error_body("An internal server error occurred."),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)
    return response


def _error_body(message: str, details: Any = None) -> dict[str, Any]:
    """Build the standard error body."""
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def _reshape_drf_body(data: Any) -> dict[str, Any]:
    """Turn DRF's ``{"detail": ...}`` or field-error payloads into our shape."""
    if isinstance(data, dict) and set(data) == {"detail"}:
        return _error_body(str(data["detail"]))
    return _error_body("Invalid input", data)


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log client errors as warnings and everything else as errors.

    Stack traces are only included in DEBUG mode.
    """
    status_code = response.status_code
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR
    if isinstance(exc, (LibraryError, APIException)) and status_code < 500:
        log_level = logging.WARNING

    request_path = getattr(request, "path", "unknown")
    request_method = getattr(request, "method", "unknown")

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
